"""Curated family-friendly recipe templates.

Amounts are written for ``servings`` people and scaled at plan time.
"""

from typing import Any

ALL_PICKY_LEVELS = ["severe", "moderate", "mild", "none"]
ALL_SKILL_LEVELS = ["beginner", "intermediate", "advanced"]

RECIPE_DATA: list[dict[str, Any]] = [
    # =========================================================================
    # Very picky eaters (beige and simple)
    # =========================================================================
    {
        "id": "chicken_nuggets_sheet_pan",
        "name": "Homemade Chicken Nuggets with Fries",
        "description": "Crispy baked chicken nuggets and golden fries - a guaranteed hit",
        "prep_time": 15,
        "cook_time": 25,
        "servings": 4,
        "difficulty": "easy",
        "category": "family_favorite",
        "picky_eater_friendly": ALL_PICKY_LEVELS,
        "dietary_restrictions": [],
        "avoid_allergies": ["peanuts", "tree_nuts", "fish", "shellfish", "soy"],
        "required_equipment": [],
        "skill_level": ALL_SKILL_LEVELS,
        "base_cost": 12.0,
        "ingredients": [
            {"name": "Chicken breast", "amount": 1.5, "unit": "lbs", "category": "meat_seafood"},
            {"name": "Breadcrumbs", "amount": 1, "unit": "cup", "category": "pantry"},
            {"name": "Eggs", "amount": 2, "unit": "whole", "category": "dairy"},
            {"name": "Potatoes", "amount": 4, "unit": "medium", "category": "produce"},
            {"name": "Olive oil", "amount": 3, "unit": "tbsp", "category": "pantry"},
            {"name": "Salt", "amount": 1, "unit": "tsp", "category": "spices"},
            {"name": "Garlic powder", "amount": 0.5, "unit": "tsp", "category": "spices"},
        ],
        "instructions": [
            "Preheat oven to 425°F. Line a large baking sheet with parchment paper.",
            "Cut chicken into nugget-sized pieces. Cut potatoes into fries.",
            "Set up a breading station: beaten eggs in one bowl, breadcrumbs mixed with "
            "salt and garlic powder in another.",
            "Dip chicken pieces in egg, then breadcrumbs. Place on one side of the sheet.",
            "Toss fries with olive oil and salt. Arrange on the other side of the sheet.",
            "Bake 20-25 minutes, flipping halfway, until chicken is cooked through.",
            "Cool slightly and serve with ketchup or a favorite dipping sauce.",
        ],
        "why_it_works": "Familiar safe foods in a healthier homemade version. Kids love "
        "the hands-on dipping.",
        "kid_friendly_tips": [
            "Let kids help with breading - it builds investment",
            "Cut nuggets small for little hands",
            "Serve several dipping sauces to encourage exploration",
        ],
        "leftover_ideas": [
            "Chicken nugget wraps for lunch",
            "Reheat fries in the air fryer for crispy results",
        ],
        "tags": ["beige food", "kid approved", "sheet pan", "make ahead"],
    },
    {
        "id": "mac_and_cheese_veggie_sneaky",
        "name": "Creamy Mac and Cheese (with Hidden Veggies)",
        "description": "Classic comfort food with pureed butternut squash for extra nutrition",
        "prep_time": 10,
        "cook_time": 20,
        "servings": 4,
        "difficulty": "easy",
        "category": "family_favorite",
        "picky_eater_friendly": ALL_PICKY_LEVELS,
        "dietary_restrictions": ["vegetarian"],
        "avoid_allergies": ["peanuts", "tree_nuts", "fish", "shellfish", "soy", "eggs"],
        "required_equipment": [],
        "skill_level": ALL_SKILL_LEVELS,
        "base_cost": 8.0,
        "ingredients": [
            {"name": "Elbow macaroni", "amount": 1, "unit": "lb", "category": "pantry"},
            {"name": "Cheddar cheese", "amount": 2, "unit": "cups", "category": "dairy"},
            {"name": "Milk", "amount": 2, "unit": "cups", "category": "dairy"},
            {"name": "Butter", "amount": 2, "unit": "tbsp", "category": "dairy"},
            {"name": "Butternut squash puree", "amount": 1, "unit": "cup", "category": "frozen"},
            {"name": "Salt", "amount": 0.5, "unit": "tsp", "category": "spices"},
            {"name": "Garlic powder", "amount": 0.25, "unit": "tsp", "category": "spices"},
        ],
        "instructions": [
            "Cook macaroni according to package directions. Drain and return to the pot.",
            "Melt butter in the same pot over medium heat.",
            "Add milk, squash puree, salt and garlic powder. Stir until smooth and warm.",
            "Add cheese gradually, stirring until melted and creamy.",
            "Mix in the macaroni until well coated and serve hot.",
        ],
        "why_it_works": "Butternut squash blends into the cheese sauce, adding vitamins and "
        "fiber without changing the familiar taste.",
        "kid_friendly_tips": [
            "The squash makes it extra creamy without being noticed",
            "Top with breadcrumbs and broil 2 minutes for a crispy top",
            "Add cooked peas if your child tolerates green",
        ],
        "leftover_ideas": [
            "Mac and cheese muffins baked in a muffin tin",
            "Stir into soup for a heartier bowl",
        ],
        "tags": ["comfort food", "hidden veggies", "one pot", "vegetarian"],
    },
    {
        "id": "breakfast_for_dinner",
        "name": "Breakfast for Dinner: Pancakes and Scrambled Eggs",
        "description": "Fun twist on dinner with favorite breakfast foods",
        "prep_time": 10,
        "cook_time": 15,
        "servings": 4,
        "difficulty": "easy",
        "category": "quick",
        "picky_eater_friendly": ALL_PICKY_LEVELS,
        "dietary_restrictions": ["vegetarian"],
        "avoid_allergies": ["peanuts", "tree_nuts", "fish", "shellfish", "soy"],
        "required_equipment": [],
        "skill_level": ALL_SKILL_LEVELS,
        "base_cost": 10.0,
        "ingredients": [
            {"name": "Pancake mix", "amount": 2, "unit": "cups", "category": "pantry"},
            {"name": "Milk", "amount": 1.5, "unit": "cups", "category": "dairy"},
            {"name": "Eggs", "amount": 8, "unit": "whole", "category": "dairy"},
            {"name": "Butter", "amount": 3, "unit": "tbsp", "category": "dairy"},
            {"name": "Maple syrup", "amount": 0.5, "unit": "cup", "category": "condiments"},
            {"name": "Fruit", "amount": 2, "unit": "cups", "category": "produce"},
        ],
        "instructions": [
            "Mix pancake batter according to package directions.",
            "Heat a griddle over medium heat with butter.",
            "Pour batter to make 4-inch pancakes. Flip once bubbles form.",
            "Whisk eggs with a splash of milk, salt and pepper.",
            "Scramble eggs over medium-low heat until fluffy.",
            "Serve pancakes with syrup and fruit, eggs on the side.",
        ],
        "why_it_works": "Breakfast for dinner feels like breaking the rules, and both foods "
        "are familiar and safe.",
        "kid_friendly_tips": [
            "Let kids pour batter or whisk eggs",
            "Make pancakes into fun shapes",
            "Add chocolate chips to a few pancakes as a treat",
        ],
        "leftover_ideas": [
            "Freeze pancakes for quick breakfasts",
            "Egg sandwich for lunch",
        ],
        "tags": ["breakfast for dinner", "kid favorite", "quick", "fun"],
    },
    {
        "id": "slow_cooker_pulled_chicken",
        "name": "Slow Cooker BBQ Pulled Chicken",
        "description": "Tender shredded chicken for sandwiches, bowls or wraps",
        "prep_time": 5,
        "cook_time": 360,
        "servings": 8,
        "difficulty": "easy",
        "category": "batch_cook",
        "picky_eater_friendly": ALL_PICKY_LEVELS,
        "dietary_restrictions": [],
        "avoid_allergies": ["peanuts", "tree_nuts", "fish", "shellfish", "eggs", "milk", "soy"],
        "required_equipment": ["slow_cooker"],
        "skill_level": ALL_SKILL_LEVELS,
        "base_cost": 18.0,
        "ingredients": [
            {"name": "Chicken breasts", "amount": 3, "unit": "lbs", "category": "meat_seafood"},
            {"name": "BBQ sauce", "amount": 2, "unit": "cups", "category": "condiments"},
            {"name": "Apple cider vinegar", "amount": 0.25, "unit": "cup", "category": "condiments"},
            {"name": "Brown sugar", "amount": 2, "unit": "tbsp", "category": "pantry"},
            {"name": "Hamburger buns", "amount": 8, "unit": "count", "category": "bakery"},
            {"name": "Coleslaw", "amount": 2, "unit": "cups", "category": "produce"},
        ],
        "instructions": [
            "Place chicken breasts in the slow cooker.",
            "Mix BBQ sauce, apple cider vinegar and brown sugar, then pour over chicken.",
            "Cook on low 6 hours or high 3-4 hours.",
            "Shred chicken with two forks right in the slow cooker and stir into the sauce.",
            "Serve on buns with coleslaw on top or on the side.",
        ],
        "why_it_works": "A huge batch that freezes beautifully. Sweet BBQ sauce appeals to "
        "kids and toppings stay optional.",
        "kid_friendly_tips": [
            "Serve sauce on the side for sauce-sensitive kids",
            "Try lettuce wraps for a no-bread option",
            "Freeze single portions for quick lunches",
        ],
        "leftover_ideas": ["BBQ chicken pizza", "Quesadillas with cheese", "Over baked potatoes"],
        "tags": ["slow cooker", "batch cook", "freezer friendly", "versatile"],
    },
    # =========================================================================
    # Moderately picky eaters
    # =========================================================================
    {
        "id": "build_your_own_tacos",
        "name": "Build-Your-Own Taco Night",
        "description": "Interactive dinner where everyone customizes their own tacos",
        "prep_time": 15,
        "cook_time": 15,
        "servings": 4,
        "difficulty": "easy",
        "category": "family_favorite",
        "picky_eater_friendly": ["moderate", "mild", "none"],
        "dietary_restrictions": [],
        "avoid_allergies": ["peanuts", "tree_nuts", "fish", "shellfish", "eggs", "soy"],
        "required_equipment": [],
        "skill_level": ALL_SKILL_LEVELS,
        "base_cost": 14.0,
        "ingredients": [
            {"name": "Ground beef or turkey", "amount": 1, "unit": "lb", "category": "meat_seafood"},
            {"name": "Taco seasoning", "amount": 1, "unit": "packet", "category": "spices"},
            {"name": "Flour tortillas", "amount": 8, "unit": "count", "category": "bakery"},
            {"name": "Shredded cheese", "amount": 1, "unit": "cup", "category": "dairy"},
            {"name": "Lettuce", "amount": 2, "unit": "cups", "category": "produce"},
            {"name": "Tomatoes", "amount": 2, "unit": "medium", "category": "produce"},
            {"name": "Sour cream", "amount": 0.5, "unit": "cup", "category": "dairy"},
            {"name": "Salsa", "amount": 1, "unit": "cup", "category": "condiments"},
        ],
        "instructions": [
            "Brown the meat in a large skillet over medium-high heat, breaking it up.",
            "Drain excess fat, then add taco seasoning and water per the packet.",
            "Simmer 5 minutes until the sauce thickens.",
            "Warm tortillas in the microwave for 30 seconds in a damp paper towel.",
            "Chop lettuce and dice tomatoes.",
            "Set out every topping in its own bowl and let everyone build their own.",
        ],
        "why_it_works": "Control over what goes in the taco empowers picky eaters. They can "
        "start with meat and cheese and add toppings over time.",
        "kid_friendly_tips": [
            "Start with minimal toppings and add more as they get comfortable",
            "Run a taco taste test where one new topping earns a reward",
            "Make it fun with taco-building competitions",
        ],
        "leftover_ideas": ["Taco salad for lunch", "Taco meat freezes well for future dinners"],
        "tags": ["interactive", "customizable", "quick", "freezer friendly"],
    },
    {
        "id": "cheesy_chicken_quesadillas",
        "name": "Cheesy Chicken Quesadillas",
        "description": "Golden, melty quesadillas cut into easy-to-hold triangles",
        "prep_time": 10,
        "cook_time": 10,
        "servings": 4,
        "difficulty": "easy",
        "category": "quick",
        "picky_eater_friendly": ["moderate", "mild", "none"],
        "dietary_restrictions": [],
        "avoid_allergies": ["peanuts", "tree_nuts", "fish", "shellfish", "eggs", "soy", "sesame"],
        "required_equipment": [],
        "skill_level": ALL_SKILL_LEVELS,
        "base_cost": 11.0,
        "ingredients": [
            {"name": "Rotisserie chicken", "amount": 2, "unit": "cups", "category": "meat_seafood"},
            {"name": "Flour tortillas", "amount": 8, "unit": "count", "category": "bakery"},
            {"name": "Shredded cheese", "amount": 2, "unit": "cups", "category": "dairy"},
            {"name": "Butter", "amount": 2, "unit": "tbsp", "category": "dairy"},
            {"name": "Salsa", "amount": 0.5, "unit": "cup", "category": "condiments"},
            {"name": "Sour cream", "amount": 0.5, "unit": "cup", "category": "dairy"},
        ],
        "instructions": [
            "Shred the chicken into small pieces.",
            "Sprinkle cheese and chicken over half of each tortilla, then fold.",
            "Melt butter in a skillet over medium heat.",
            "Cook quesadillas 2-3 minutes per side until golden and the cheese melts.",
            "Cut into triangles and serve with salsa and sour cream for dipping.",
        ],
        "why_it_works": "Cheese and tortilla are familiar favorites, and the chicken hides "
        "inside a food kids already trust.",
        "kid_friendly_tips": [
            "Make a cheese-only quesadilla for the pickiest eater",
            "Let kids sprinkle their own fillings",
            "Cut into strips for dipping",
        ],
        "leftover_ideas": ["Reheat in a dry skillet for lunch", "Chop into a quesadilla salad"],
        "tags": ["quick", "weeknight", "kid favorite", "15 minute"],
    },
    {
        "id": "baked_ziti",
        "name": "Make-Ahead Baked Ziti",
        "description": "Cheesy baked pasta that doubles easily and freezes well",
        "prep_time": 15,
        "cook_time": 35,
        "servings": 6,
        "difficulty": "easy",
        "category": "batch_cook",
        "picky_eater_friendly": ["moderate", "mild", "none"],
        "dietary_restrictions": ["vegetarian"],
        "avoid_allergies": ["peanuts", "tree_nuts", "fish", "shellfish", "eggs", "soy", "sesame"],
        "required_equipment": [],
        "skill_level": ALL_SKILL_LEVELS,
        "base_cost": 13.0,
        "ingredients": [
            {"name": "Penne pasta", "amount": 1, "unit": "lb", "category": "pantry"},
            {"name": "Marinara sauce", "amount": 3, "unit": "cups", "category": "canned"},
            {"name": "Ricotta cheese", "amount": 1, "unit": "cup", "category": "dairy"},
            {"name": "Mozzarella cheese", "amount": 2, "unit": "cups", "category": "dairy"},
            {"name": "Parmesan cheese", "amount": 0.5, "unit": "cup", "category": "dairy"},
            {"name": "Italian seasoning", "amount": 1, "unit": "tsp", "category": "spices"},
        ],
        "instructions": [
            "Preheat oven to 375°F. Cook pasta 2 minutes short of package directions.",
            "Stir pasta with marinara, ricotta, half the mozzarella and Italian seasoning.",
            "Spread into a baking dish and top with remaining mozzarella and Parmesan.",
            "Bake 25 minutes until bubbly and golden on top.",
            "Rest 5 minutes before serving.",
        ],
        "why_it_works": "Plain pasta and cheese with a mild sauce. Assemble it on the weekend "
        "and bake it straight from the fridge.",
        "kid_friendly_tips": [
            "Keep a sauce-free corner for kids who prefer plain pasta",
            "Let kids sprinkle the cheese topping",
            "Serve with garlic bread as a familiar side",
        ],
        "leftover_ideas": ["Freeze portions for up to 3 months", "Reheat for lunchbox thermos"],
        "tags": ["batch cook", "freezer friendly", "vegetarian", "make ahead"],
    },
    {
        "id": "one_pot_chicken_noodle_soup",
        "name": "One-Pot Chicken Noodle Soup",
        "description": "Cozy, mild soup with soft noodles and tender chicken",
        "prep_time": 15,
        "cook_time": 30,
        "servings": 6,
        "difficulty": "easy",
        "category": "one_pot",
        "picky_eater_friendly": ["moderate", "mild", "none"],
        "dietary_restrictions": ["dairy_free"],
        "avoid_allergies": ["peanuts", "tree_nuts", "fish", "shellfish", "milk", "soy", "sesame"],
        "required_equipment": [],
        "skill_level": ALL_SKILL_LEVELS,
        "base_cost": 12.0,
        "ingredients": [
            {"name": "Chicken thighs", "amount": 1.5, "unit": "lbs", "category": "meat_seafood"},
            {"name": "Chicken broth", "amount": 8, "unit": "cups", "category": "canned"},
            {"name": "Egg noodles", "amount": 8, "unit": "oz", "category": "pantry"},
            {"name": "Carrots", "amount": 3, "unit": "medium", "category": "produce"},
            {"name": "Celery", "amount": 2, "unit": "stalks", "category": "produce"},
            {"name": "Onion", "amount": 1, "unit": "medium", "category": "produce"},
            {"name": "Olive oil", "amount": 1, "unit": "tbsp", "category": "pantry"},
            {"name": "Salt", "amount": 1, "unit": "tsp", "category": "spices"},
        ],
        "instructions": [
            "Heat olive oil in a large pot and soften diced onion, carrots and celery.",
            "Add chicken thighs and broth. Bring to a boil, then simmer 20 minutes.",
            "Remove chicken, shred it, and return it to the pot.",
            "Add noodles and cook 6-8 minutes until tender. Season with salt.",
        ],
        "why_it_works": "Soft textures and a mild broth suit texture-sensitive kids, and "
        "everything cooks in one pot.",
        "kid_friendly_tips": [
            "Serve noodles and broth separately for kids who dislike mixed foods",
            "Cut carrots into coins or stars",
            "Offer crackers for dunking",
        ],
        "leftover_ideas": ["Freeze soup without noodles", "Thermos lunch the next day"],
        "tags": ["one pot", "comfort food", "soup", "freezer friendly"],
    },
    {
        "id": "slow_cooker_chicken_rice",
        "name": "Slow Cooker Chicken and Rice",
        "description": "Set it and forget it - tender chicken with fluffy rice",
        "prep_time": 10,
        "cook_time": 240,
        "servings": 6,
        "difficulty": "easy",
        "category": "slow_cooker",
        "picky_eater_friendly": ["moderate", "mild", "none"],
        "dietary_restrictions": [],
        "avoid_allergies": ["peanuts", "tree_nuts", "fish", "shellfish", "eggs", "soy"],
        "required_equipment": ["slow_cooker"],
        "skill_level": ALL_SKILL_LEVELS,
        "base_cost": 16.0,
        "ingredients": [
            {"name": "Chicken breasts", "amount": 2, "unit": "lbs", "category": "meat_seafood"},
            {"name": "Long grain rice", "amount": 1.5, "unit": "cups", "category": "pantry"},
            {"name": "Chicken broth", "amount": 3, "unit": "cups", "category": "canned"},
            {"name": "Cream of chicken soup", "amount": 1, "unit": "can", "category": "canned"},
            {"name": "Frozen mixed vegetables", "amount": 2, "unit": "cups", "category": "frozen"},
            {"name": "Onion powder", "amount": 1, "unit": "tsp", "category": "spices"},
            {"name": "Garlic powder", "amount": 1, "unit": "tsp", "category": "spices"},
        ],
        "instructions": [
            "Spray the slow cooker with non-stick spray and add the chicken.",
            "Mix rice, broth, soup, onion powder and garlic powder; pour over chicken.",
            "Cover and cook on low for 4 hours.",
            "Add frozen vegetables for the last 30 minutes.",
            "Shred chicken with two forks and mix it into the rice.",
        ],
        "why_it_works": "Minimal prep with a mild taste and soft texture that suits "
        "texture-sensitive kids.",
        "kid_friendly_tips": [
            "Pick out veggies or serve them on the side for very picky eaters",
            "The chicken is tender enough to shred easily",
            "Great for busy weeknights with almost no hands-on time",
        ],
        "leftover_ideas": ["Chicken and rice soup with extra broth", "Stuffed peppers"],
        "tags": ["slow cooker", "hands off", "batch cook", "freezer friendly"],
    },
    {
        "id": "instant_pot_chili",
        "name": "Family-Friendly Instant Pot Chili",
        "description": "Hearty, mildly spiced chili ready in under 30 minutes",
        "prep_time": 10,
        "cook_time": 20,
        "servings": 8,
        "difficulty": "easy",
        "category": "batch_cook",
        "picky_eater_friendly": ["moderate", "mild", "none"],
        "dietary_restrictions": [],
        "avoid_allergies": ["peanuts", "tree_nuts", "fish", "shellfish", "eggs", "milk", "soy"],
        "required_equipment": ["instant_pot"],
        "skill_level": ALL_SKILL_LEVELS,
        "base_cost": 16.0,
        "ingredients": [
            {"name": "Ground beef", "amount": 2, "unit": "lbs", "category": "meat_seafood"},
            {"name": "Kidney beans", "amount": 2, "unit": "cans", "category": "canned"},
            {"name": "Diced tomatoes", "amount": 2, "unit": "cans", "category": "canned"},
            {"name": "Tomato sauce", "amount": 1, "unit": "can", "category": "canned"},
            {"name": "Onion", "amount": 1, "unit": "large", "category": "produce"},
            {"name": "Chili powder", "amount": 2, "unit": "tbsp", "category": "spices"},
            {"name": "Cumin", "amount": 1, "unit": "tsp", "category": "spices"},
            {"name": "Cheddar cheese", "amount": 1, "unit": "cup", "category": "dairy"},
            {"name": "Sour cream", "amount": 0.5, "unit": "cup", "category": "dairy"},
        ],
        "instructions": [
            "Brown beef with diced onion on saute mode, then drain excess fat.",
            "Add beans, tomatoes, tomato sauce, chili powder and cumin.",
            "Pressure cook on high for 10 minutes.",
            "Natural release 10 minutes, then quick release.",
            "Serve with cheese and sour cream on top.",
        ],
        "why_it_works": "Mild enough for kids, customizable toppings, and enough to freeze "
        "for future dinners.",
        "kid_friendly_tips": [
            "Reduce chili powder for very sensitive palates",
            "Serve over rice or pasta for picky eaters",
            "Top with cheese to make it more familiar",
        ],
        "leftover_ideas": ["Chili cheese fries", "Chili dogs", "Freezes for up to 3 months"],
        "tags": ["instant pot", "batch cook", "freezer friendly", "comfort food"],
    },
    # =========================================================================
    # Adventurous eaters
    # =========================================================================
    {
        "id": "sheet_pan_teriyaki_salmon",
        "name": "Sheet Pan Teriyaki Salmon and Broccoli",
        "description": "Healthy, colorful dinner with a sweet-savory glaze",
        "prep_time": 10,
        "cook_time": 20,
        "servings": 4,
        "difficulty": "easy",
        "category": "quick",
        "picky_eater_friendly": ["mild", "none"],
        "dietary_restrictions": [],
        "avoid_allergies": ["peanuts", "tree_nuts", "eggs", "milk", "wheat"],
        "required_equipment": [],
        "skill_level": ALL_SKILL_LEVELS,
        "base_cost": 22.0,
        "ingredients": [
            {"name": "Salmon fillets", "amount": 1.5, "unit": "lbs", "category": "meat_seafood"},
            {"name": "Broccoli florets", "amount": 4, "unit": "cups", "category": "produce"},
            {"name": "Teriyaki sauce", "amount": 0.5, "unit": "cup", "category": "condiments"},
            {"name": "Honey", "amount": 2, "unit": "tbsp", "category": "condiments"},
            {"name": "Garlic", "amount": 2, "unit": "cloves", "category": "produce"},
            {"name": "Sesame seeds", "amount": 1, "unit": "tbsp", "category": "spices"},
            {"name": "White rice", "amount": 2, "unit": "cups", "category": "pantry"},
        ],
        "instructions": [
            "Preheat oven to 400°F and start the rice.",
            "Place salmon and broccoli on a lined baking sheet.",
            "Mix teriyaki sauce, honey and minced garlic; brush over the salmon.",
            "Roast 15-18 minutes until the salmon flakes easily.",
            "Sprinkle with sesame seeds and serve over rice.",
        ],
        "why_it_works": "Sweet teriyaki makes fish and vegetables more appealing, with "
        "minimal cleanup.",
        "kid_friendly_tips": [
            "Let kids sprinkle the sesame seeds as their job",
            "Serve extra teriyaki on the side for dipping",
            "Start with small portions of broccoli and praise each bite",
        ],
        "leftover_ideas": ["Salmon fried rice", "Flake salmon over salad for lunch"],
        "tags": ["sheet pan", "healthy", "omega 3", "quick"],
    },
    {
        "id": "one_pot_pasta_primavera",
        "name": "One-Pot Creamy Pasta Primavera",
        "description": "Colorful vegetable pasta that cooks all in one pot",
        "prep_time": 10,
        "cook_time": 15,
        "servings": 4,
        "difficulty": "easy",
        "category": "one_pot",
        "picky_eater_friendly": ["mild", "none"],
        "dietary_restrictions": ["vegetarian"],
        "avoid_allergies": ["peanuts", "tree_nuts", "fish", "shellfish", "eggs", "soy"],
        "required_equipment": [],
        "skill_level": ALL_SKILL_LEVELS,
        "base_cost": 12.0,
        "ingredients": [
            {"name": "Penne pasta", "amount": 1, "unit": "lb", "category": "pantry"},
            {"name": "Cherry tomatoes", "amount": 2, "unit": "cups", "category": "produce"},
            {"name": "Zucchini", "amount": 2, "unit": "medium", "category": "produce"},
            {"name": "Bell pepper", "amount": 1, "unit": "whole", "category": "produce"},
            {"name": "Garlic", "amount": 3, "unit": "cloves", "category": "produce"},
            {"name": "Heavy cream", "amount": 1, "unit": "cup", "category": "dairy"},
            {"name": "Parmesan cheese", "amount": 1, "unit": "cup", "category": "dairy"},
            {"name": "Vegetable broth", "amount": 3, "unit": "cups", "category": "canned"},
            {"name": "Italian seasoning", "amount": 1, "unit": "tsp", "category": "spices"},
        ],
        "instructions": [
            "Combine pasta, tomatoes, diced zucchini and pepper, garlic and broth in a pot.",
            "Boil, then simmer 12-15 minutes, stirring, until the pasta is tender.",
            "Stir in cream, Parmesan and Italian seasoning.",
            "Cook 2 more minutes until creamy. Season and serve.",
        ],
        "why_it_works": "Vegetables break down into the creamy sauce, and the colors make "
        "it visually appealing.",
        "kid_friendly_tips": [
            "Dice vegetables very small",
            "Add extra cheese for hesitant veggie eaters",
            "Let it cool slightly before serving",
        ],
        "leftover_ideas": ["Pasta bake with mozzarella on top", "Cold pasta salad"],
        "tags": ["one pot", "vegetarian", "colorful", "quick"],
    },
    {
        "id": "stir_fry_chicken_veggies",
        "name": "15-Minute Chicken Stir-Fry",
        "description": "Quick and colorful stir-fry with simple flavors",
        "prep_time": 10,
        "cook_time": 10,
        "servings": 4,
        "difficulty": "easy",
        "category": "quick",
        "picky_eater_friendly": ["mild", "none"],
        "dietary_restrictions": [],
        "avoid_allergies": ["peanuts", "tree_nuts", "fish", "shellfish", "eggs", "milk"],
        "required_equipment": [],
        "skill_level": ALL_SKILL_LEVELS,
        "base_cost": 15.0,
        "ingredients": [
            {"name": "Chicken breast", "amount": 1, "unit": "lb", "category": "meat_seafood"},
            {
                "name": "Frozen stir-fry vegetables",
                "amount": 4,
                "unit": "cups",
                "category": "frozen",
            },
            {"name": "Soy sauce", "amount": 0.25, "unit": "cup", "category": "condiments"},
            {"name": "Honey", "amount": 2, "unit": "tbsp", "category": "condiments"},
            {"name": "Garlic", "amount": 2, "unit": "cloves", "category": "produce"},
            {"name": "Ginger", "amount": 1, "unit": "tsp", "category": "spices"},
            {"name": "White rice", "amount": 2, "unit": "cups", "category": "pantry"},
            {"name": "Vegetable oil", "amount": 2, "unit": "tbsp", "category": "pantry"},
        ],
        "instructions": [
            "Cook rice according to package directions.",
            "Cut chicken into bite-sized pieces.",
            "Mix soy sauce, honey, minced garlic and ginger.",
            "Stir-fry chicken in hot oil 5 minutes until golden.",
            "Add frozen vegetables and sauce; cook 5 minutes more. Serve over rice.",
        ],
        "why_it_works": "A sweet honey-soy sauce appeals to kids, and frozen veggies keep "
        "it fast.",
        "kid_friendly_tips": [
            "Choose a mild stir-fry mix",
            "Cut chicken extra small for little ones",
            "Put extra sauce on the side for dipping",
        ],
        "leftover_ideas": ["Fried rice tomorrow night", "Wrap in a tortilla for lunch"],
        "tags": ["quick", "15 minute", "weeknight", "one pan"],
    },
    {
        "id": "air_fryer_fish_sticks",
        "name": "Air Fryer Crispy Fish Sticks",
        "description": "Crunchy homemade fish sticks with a lemony dip",
        "prep_time": 15,
        "cook_time": 12,
        "servings": 4,
        "difficulty": "easy",
        "category": "quick",
        "picky_eater_friendly": ["mild", "none"],
        "dietary_restrictions": [],
        "avoid_allergies": ["peanuts", "tree_nuts", "shellfish", "soy", "sesame"],
        "required_equipment": ["air_fryer"],
        "skill_level": ALL_SKILL_LEVELS,
        "base_cost": 14.0,
        "ingredients": [
            {"name": "White fish fillets", "amount": 1.5, "unit": "lbs", "category": "meat_seafood"},
            {"name": "Panko breadcrumbs", "amount": 1.5, "unit": "cups", "category": "pantry"},
            {"name": "Eggs", "amount": 2, "unit": "whole", "category": "dairy"},
            {"name": "Mayonnaise", "amount": 0.5, "unit": "cup", "category": "condiments"},
            {"name": "Lemon", "amount": 1, "unit": "whole", "category": "produce"},
            {"name": "Salt", "amount": 0.5, "unit": "tsp", "category": "spices"},
        ],
        "instructions": [
            "Cut fish into finger-sized strips and season with salt.",
            "Dip strips in beaten egg, then press into panko.",
            "Air fry at 400°F for 10-12 minutes, flipping halfway.",
            "Stir lemon juice into mayonnaise for a quick dip.",
        ],
        "why_it_works": "The familiar fish-stick shape and crunch make a first step toward "
        "eating fish.",
        "kid_friendly_tips": [
            "Call them fish fries",
            "Offer ketchup alongside the lemon dip",
            "Let kids do the breading",
        ],
        "leftover_ideas": ["Fish tacos with slaw", "Re-crisp in the air fryer"],
        "tags": ["air fryer", "quick", "seafood", "crispy"],
    },
    {
        "id": "vegan_black_bean_tacos",
        "name": "Black Bean and Sweet Potato Tacos",
        "description": "Plant-based tacos with roasted sweet potato and smoky beans",
        "prep_time": 15,
        "cook_time": 25,
        "servings": 4,
        "difficulty": "easy",
        "category": "family_favorite",
        "picky_eater_friendly": ["mild", "none"],
        "dietary_restrictions": [
            "vegetarian",
            "vegan",
            "dairy_free",
            "egg_free",
            "nut_free",
            "soy_free",
        ],
        "avoid_allergies": [
            "peanuts",
            "tree_nuts",
            "milk",
            "eggs",
            "soy",
            "fish",
            "shellfish",
            "sesame",
        ],
        "required_equipment": [],
        "skill_level": ALL_SKILL_LEVELS,
        "base_cost": 9.0,
        "ingredients": [
            {"name": "Sweet potatoes", "amount": 2, "unit": "medium", "category": "produce"},
            {"name": "Black beans", "amount": 2, "unit": "cans", "category": "canned"},
            {"name": "Flour tortillas", "amount": 8, "unit": "count", "category": "bakery"},
            {"name": "Avocado", "amount": 2, "unit": "whole", "category": "produce"},
            {"name": "Olive oil", "amount": 2, "unit": "tbsp", "category": "pantry"},
            {"name": "Cumin", "amount": 1, "unit": "tsp", "category": "spices"},
            {"name": "Chili powder", "amount": 1, "unit": "tsp", "category": "spices"},
            {"name": "Salsa", "amount": 1, "unit": "cup", "category": "condiments"},
        ],
        "instructions": [
            "Preheat oven to 425°F. Dice sweet potatoes and toss with oil and spices.",
            "Roast 20-25 minutes until tender and caramelized.",
            "Warm the black beans in a small pot and mash lightly.",
            "Fill warm tortillas with beans, sweet potato, sliced avocado and salsa.",
        ],
        "why_it_works": "Sweet potato is naturally sweet and soft, making it an easy bridge "
        "to beans and new textures.",
        "kid_friendly_tips": [
            "Serve fillings separately so kids can choose",
            "Mash the beans smooth for texture-sensitive eaters",
            "Cut sweet potato into fry shapes",
        ],
        "leftover_ideas": ["Burrito bowls with rice", "Sweet potato and bean quesadillas"],
        "tags": ["vegan", "plant based", "meatless monday", "budget"],
    },
    {
        "id": "homemade_lasagna",
        "name": "Classic Homemade Lasagna",
        "description": "Layered beef and cheese lasagna that feeds a crowd",
        "prep_time": 30,
        "cook_time": 60,
        "servings": 8,
        "difficulty": "medium",
        "category": "batch_cook",
        "picky_eater_friendly": ["moderate", "mild", "none"],
        "dietary_restrictions": [],
        "avoid_allergies": ["peanuts", "tree_nuts", "fish", "shellfish", "soy", "sesame"],
        "required_equipment": [],
        "skill_level": ["intermediate", "advanced"],
        "base_cost": 24.0,
        "ingredients": [
            {"name": "Lasagna noodles", "amount": 12, "unit": "count", "category": "pantry"},
            {"name": "Ground beef", "amount": 1.5, "unit": "lbs", "category": "meat_seafood"},
            {"name": "Marinara sauce", "amount": 4, "unit": "cups", "category": "canned"},
            {"name": "Ricotta cheese", "amount": 2, "unit": "cups", "category": "dairy"},
            {"name": "Mozzarella cheese", "amount": 3, "unit": "cups", "category": "dairy"},
            {"name": "Parmesan cheese", "amount": 1, "unit": "cup", "category": "dairy"},
            {"name": "Eggs", "amount": 1, "unit": "whole", "category": "dairy"},
            {"name": "Onion", "amount": 1, "unit": "medium", "category": "produce"},
            {"name": "Italian seasoning", "amount": 2, "unit": "tsp", "category": "spices"},
        ],
        "instructions": [
            "Brown beef with diced onion, drain, and stir in marinara and seasoning.",
            "Mix ricotta with the egg and half the Parmesan.",
            "Layer sauce, noodles, ricotta mixture and mozzarella three times.",
            "Top with remaining mozzarella and Parmesan, cover with foil.",
            "Bake at 375°F for 45 minutes, uncover and bake 15 minutes more.",
            "Rest 15 minutes before slicing.",
        ],
        "why_it_works": "Pasta, cheese and a mild meat sauce in neat squares. One bake "
        "covers two dinners.",
        "kid_friendly_tips": [
            "Cut a small corner piece with extra cheese for hesitant eaters",
            "Let kids spread the ricotta layer",
            "Serve with a familiar side like garlic bread",
        ],
        "leftover_ideas": ["Freeze individual squares", "Lasagna soup"],
        "tags": ["batch cook", "comfort food", "freezer friendly", "weekend project"],
    },
]
