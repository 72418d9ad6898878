"""
Seed Data

The example recipe inserted by services.seed. Quantities line up with
the ingredient list by position.
"""

EXAMPLE_RECIPE = {
    'user': {
        'username': 'exampleuser',
        'email': 'user@example.com',
        'password': 'password',  # hashed before it is stored
    },
    'ingredients': [
        'Strawberries',
        'Spinach',
        'Almonds',
        'Feta Cheese',
        'Balsamic Vinaigrette',
    ],
    'recipe': {
        'title': 'Strawberry Spinach Salad',
        'description': 'A fresh and healthy salad combining strawberries and spinach.',
    },
    'quantities': [
        ('Strawberries', 200, 'grams'),
        ('Spinach', 100, 'grams'),
        ('Almonds', 50, 'grams'),
        ('Feta Cheese', 50, 'grams'),
        ('Balsamic Vinaigrette', 30, 'ml'),
    ],
    'instructions': [
        'Wash and slice strawberries.',
        'Wash spinach and dry it thoroughly.',
        'Mix spinach, strawberries, almonds, and feta cheese in a large bowl.',
        'Drizzle balsamic vinaigrette over the salad.',
        'Toss the salad gently and serve immediately.',
    ],
}
