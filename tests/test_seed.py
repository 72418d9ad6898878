"""Tests for the transactional example seed."""
import copy

import pytest

from constants import EXAMPLE_RECIPE
from models import User, Ingredient, Recipe, RecipeIngredient, Instruction
from services import seed_example_recipe
from utils.errors import SeedError, ValidationError


def _counts():
    return {
        'users': User.query.count(),
        'ingredients': Ingredient.query.count(),
        'recipes': Recipe.query.count(),
        'recipe_ingredients': RecipeIngredient.query.count(),
        'instructions': Instruction.query.count(),
    }


def test_seed_commits_example_recipe(session, logger, log_capture):
    recipe = seed_example_recipe(session, logger)

    assert _counts() == {
        'users': 1, 'ingredients': 5, 'recipes': 1,
        'recipe_ingredients': 5, 'instructions': 5,
    }

    stored = session.get(Recipe, recipe.id)
    assert stored.title == 'Strawberry Spinach Salad'
    assert stored.user.username == 'exampleuser'
    assert stored.user.email == 'user@example.com'
    assert [step.step_number for step in stored.instructions] == [1, 2, 3, 4, 5]
    assert stored.instructions[0].description == 'Wash and slice strawberries.'

    quantities = {ri.ingredient.name: (ri.quantity, ri.unit) for ri in stored.ingredients}
    assert quantities == {
        'Strawberries': (200, 'grams'),
        'Spinach': (100, 'grams'),
        'Almonds': (50, 'grams'),
        'Feta Cheese': (50, 'grams'),
        'Balsamic Vinaigrette': (30, 'ml'),
    }

    created = [r for r in log_capture.records if r['msg'] == 'Recipe created successfully']
    assert created and created[0]['recipe_id'] == recipe.id


def test_seed_hashes_password(session, logger):
    seed_example_recipe(session, logger)

    user = User.query.filter_by(username='exampleuser').one()
    assert user.password_hash != 'password'
    assert user.check_password('password')


def test_failed_fourth_instruction_rolls_back_everything(session, logger, log_capture):
    data = copy.deepcopy(EXAMPLE_RECIPE)
    data['instructions'][3] = None  # rejected after three instructions were flushed

    with pytest.raises(SeedError) as exc:
        seed_example_recipe(session, logger, data)

    assert exc.value.step == 'instruction'
    assert _counts() == {
        'users': 0, 'ingredients': 0, 'recipes': 0,
        'recipe_ingredients': 0, 'instructions': 0,
    }
    assert 'Failed to create instruction' in log_capture.messages('error')


def test_second_seed_fails_on_duplicate_user_and_keeps_first(session, logger):
    seed_example_recipe(session, logger)

    with pytest.raises(SeedError) as exc:
        seed_example_recipe(session, logger)

    assert exc.value.step == 'user'
    assert User.query.count() == 1
    assert Recipe.query.count() == 1
    assert Instruction.query.count() == 5


def test_duplicate_ingredient_in_seed_rolls_back_user(session, logger):
    data = copy.deepcopy(EXAMPLE_RECIPE)
    data['ingredients'].append('Spinach')

    with pytest.raises(SeedError) as exc:
        seed_example_recipe(session, logger, data)

    assert exc.value.step == 'ingredient'
    assert User.query.count() == 0
    assert Ingredient.query.count() == 0


def test_unknown_ingredient_quantity_rolls_back(session, logger):
    data = copy.deepcopy(EXAMPLE_RECIPE)
    data['quantities'].append(('Basil', 5, 'leaves'))

    with pytest.raises(SeedError) as exc:
        seed_example_recipe(session, logger, data)

    assert exc.value.step == 'recipe ingredient'
    assert Recipe.query.count() == 0
    assert RecipeIngredient.query.count() == 0


def test_invalid_email_is_rejected_before_insert(session, logger):
    data = copy.deepcopy(EXAMPLE_RECIPE)
    data['user']['email'] = 'not-an-email'

    with pytest.raises(SeedError) as exc:
        seed_example_recipe(session, logger, data)

    assert exc.value.step == 'user'
    assert User.query.count() == 0


def test_broken_step_sequence_rolls_back_everything(session, logger, log_capture, monkeypatch):
    def reject(steps):
        raise ValidationError('step_number', f"steps must run 1..{len(steps)} without gaps")

    monkeypatch.setattr('services.seed.check_step_sequence', reject)

    with pytest.raises(SeedError) as exc:
        seed_example_recipe(session, logger)

    assert exc.value.step == 'instruction sequence'
    assert isinstance(exc.value.__cause__, ValidationError)
    assert _counts()['recipes'] == 0
    assert _counts()['instructions'] == 0
    assert 'Failed to create instruction sequence' in log_capture.messages('error')
