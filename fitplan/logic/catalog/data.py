"""Static program tables handed to every newly enrolled user."""
from typing import Final

SCHEDULE_TEMPLATE: Final[dict[str, dict[str, str]]] = {
    "10:00": {
        "title": "☕ Black coffee or tea (optional)",
        "description": "No milk/sugar, helps suppress hunger",
    },
    "12:00": {"title": "🚰 500ml water", "description": "Stay hydrated"},
    "14:00": {
        "title": "🚰 More water or herbal tea",
        "description": "Helps with satiety",
    },
    "16:00": {"title": "Snack", "description": "Today's scheduled snack"},
    "17:00": {
        "title": "Workout (See schedule)",
        "description": "This could be running, VR fitness, or a bodyweight circuit.",
    },
    "18:00": {"title": "Post-workout water/shower", "description": "Replenish fluids."},
    "19:00": {"title": "Free time/Relax", "description": "Do whatever you want to spend your time"},
    "21:00": {"title": "Prepare Dinner", "description": "Cooking time."},
    "22:00": {
        "title": "🍽️ Main Meal (OMAD) with Family",
        "description": "Large, balanced meal",
    },
    "00:30": {"title": "🚶 Light walk or stretch", "description": "Helps digestion"},
    "01:30": {"title": "🛏️ Sleep", "description": "Supports muscle recovery & fat loss"},
}

MEAL_PLAN: Final[dict[str, dict[str, str]]] = {
    "Monday": {
        "main_meal": "Grilled chicken breast (150g) with 100g cooked rice, a large salad (cucumber, tomato, onion, bell pepper) with 1 tbsp olive oil and vinegar dressing.",
        "snack": "Handful of almonds and a small apple.",
    },
    "Tuesday": {
        "main_meal": "Lean beef stir-fry (150g beef) with lots of vegetables (onions, peppers, mushrooms, zucchini) and 100g cooked rice. Use a low-sodium soy sauce and a little olive oil.",
        "snack": "Greek yogurt with berries.",
    },
    "Wednesday": {
        "main_meal": "Baked chicken breast (150g) with roasted vegetables (carrots, green beans, asparagus) and a side of 100g cooked rice.",
        "snack": "Protein shake with water.",
    },
    "Thursday": {
        "main_meal": "Healthy pasta with mixed vegetables and lean protein. 100g whole wheat pasta with grilled chicken and vegetables.",
        "snack": "Handful of walnuts and a banana.",
    },
    "Friday": {
        "main_meal": "Grilled chicken salad (150g chicken) with a huge bed of mixed greens, cucumber, tomato, and a light vinaigrette dressing. 100g cooked rice on the side.",
        "snack": "Greek yogurt with a few berries.",
    },
    "Saturday": {
        "main_meal": "Lean beef and vegetable kebabs (150g beef) with bell peppers, onions, and zucchini. Serve with 100g cooked rice.",
        "snack": "Protein shake with water.",
    },
    "Sunday": {
        "main_meal": "Chicken breast (150g) baked with herbs and spices, served with a large portion of steamed vegetables (spinach, carrots, green beans) and 100g cooked rice.",
        "snack": "A small handful of mixed nuts and an orange.",
    },
}

# week number -> day -> workout name
WORKOUT_PLAN: Final[dict[int, dict[str, str]]] = {
    1: {
        "Monday": "Rest",
        "Tuesday": "30 min VR fitness (moderate)",
        "Wednesday": "Bodyweight Circuit 1",
        "Thursday": "30 min Run (easy pace)",
        "Friday": "Bodyweight Circuit 1",
        "Saturday": "45 min VR fitness (moderate)",
        "Sunday": "Rest",
    },
    2: {
        "Monday": "35 min Run (easy pace)",
        "Tuesday": "Bodyweight Circuit 2",
        "Wednesday": "40 min VR fitness (moderate)",
        "Thursday": "Rest",
        "Friday": "Bodyweight Circuit 2",
        "Saturday": "50 min Run (easy pace)",
        "Sunday": "Rest",
    },
    3: {
        "Monday": "Bodyweight Circuit 1",
        "Tuesday": "45 min VR fitness (moderate/high)",
        "Wednesday": "45 min Run (intervals: 2 min fast, 2 min slow)",
        "Thursday": "Bodyweight Circuit 1",
        "Friday": "Rest",
        "Saturday": "60 min VR fitness (moderate/high)",
        "Sunday": "Rest",
    },
    4: {
        "Monday": "50 min Run (intervals: 3 min fast, 2 min slow)",
        "Tuesday": "Bodyweight Circuit 2",
        "Wednesday": "Rest",
        "Thursday": "50 min Run (steady pace)",
        "Friday": "Bodyweight Circuit 2",
        "Saturday": "Long walk (60+ min)",
        "Sunday": "Rest",
    },
    5: {
        "Monday": "Rest",
        "Tuesday": "VR fitness (moderate)",
        "Wednesday": "Bodyweight Circuit 1",
        "Thursday": "Run (easy pace)",
        "Friday": "Bodyweight Circuit 1",
        "Saturday": "VR fitness (moderate)",
        "Sunday": "Rest",
    },
    6: {
        "Monday": "Run (easy pace)",
        "Tuesday": "Bodyweight Circuit 2",
        "Wednesday": "VR fitness (moderate)",
        "Thursday": "Rest",
        "Friday": "Bodyweight Circuit 2",
        "Saturday": "Run (easy pace)",
        "Sunday": "Rest",
    },
    7: {
        "Monday": "Bodyweight Circuit 1",
        "Tuesday": "VR fitness (moderate/high)",
        "Wednesday": "Run (intervals: 2 min fast, 2 min slow)",
        "Thursday": "Bodyweight Circuit 1",
        "Friday": "Rest",
        "Saturday": "VR fitness (moderate/high)",
        "Sunday": "Rest",
    },
    8: {
        "Monday": "Run (intervals: 3 min fast, 2 min slow)",
        "Tuesday": "Bodyweight Circuit 2",
        "Wednesday": "Rest",
        "Thursday": "Run (steady pace)",
        "Friday": "Bodyweight Circuit 2",
        "Saturday": "Long walk (60+ min)",
        "Sunday": "Rest",
    },
}

BODYWEIGHT_CIRCUITS: Final[dict[str, str]] = {
    "Bodyweight Circuit 1": "\n".join([
        "Squats (10-15 reps)",
        "Push-ups (as many as possible with good form)",
        "Walking Lunges (10 reps per leg)",
        "Plank (30-60 seconds)",
        "Crunches (15-20 reps)",
        "Repeat circuit 2-3 times with 1-minute rest between circuits.",
    ]),
    "Bodyweight Circuit 2": "\n".join([
        "Jump Squats (10-12 reps)",
        "Incline Push-ups (using a chair or wall) (as many as possible)",
        "Reverse Lunges (10 reps per leg)",
        "Side Plank (30 seconds per side)",
        "Bicycle Crunches (15-20 reps)",
        "Repeat circuit 2-3 times with 1-minute rest between circuits.",
    ]),
    "Bodyweight Circuit Alternative": "\n".join([
        "Burpees (as good form as possible)",
        "Decline Push-ups (using a chair or wall)",
        "Glute Bridge (15-20 reps)",
        "Russian Twists (15-20 reps)",
        "Superman (hold for 30 seconds)",
    ]),
}

RUN_DETAILS: Final[str] = "\n".join([
    "Start with a pace you can maintain comfortably.",
    "Gradually increase the duration of your runs.",
    "Incorporate intervals (alternating between fast and slow running) to boost calorie burn and improve fitness.",
])
