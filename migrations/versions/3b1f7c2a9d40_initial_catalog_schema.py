"""Initial catalog schema

Revision ID: 3b1f7c2a9d40
Revises:
Create Date: 2026-10-19 09:12:44.118204

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3b1f7c2a9d40'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=100), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_users')),
        sa.UniqueConstraint('email', name=op.f('uq_users_email')),
        sa.UniqueConstraint('username', name=op.f('uq_users_username')),
    )
    op.create_table(
        'ingredients',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_ingredients')),
        sa.UniqueConstraint('name', name=op.f('uq_ingredients_name')),
    )
    op.create_table(
        'categories',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_categories')),
        sa.UniqueConstraint('name', name=op.f('uq_categories_name')),
    )
    op.create_table(
        'tags',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_tags')),
        sa.UniqueConstraint('name', name=op.f('uq_tags_name')),
    )
    op.create_table(
        'seasonalities',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('ingredient_id', sa.Integer(), nullable=False),
        sa.Column('season_start', sa.Integer(), nullable=False),
        sa.Column('season_end', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint('season_start BETWEEN 1 AND 12', name=op.f('ck_seasonalities_season_start_month')),
        sa.CheckConstraint('season_end BETWEEN 1 AND 12', name=op.f('ck_seasonalities_season_end_month')),
        sa.ForeignKeyConstraint(['ingredient_id'], ['ingredients.id'], ondelete='CASCADE',
                                name=op.f('fk_seasonalities_ingredient_id_ingredients')),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_seasonalities')),
        sa.UniqueConstraint('ingredient_id', name=op.f('uq_seasonalities_ingredient_id')),
    )
    op.create_table(
        'recipes',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('prep_time', sa.Integer(), server_default='0', nullable=False),
        sa.Column('cook_time', sa.Integer(), server_default='0', nullable=False),
        sa.Column('servings', sa.Integer(), server_default='0', nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.CheckConstraint('prep_time >= 0', name=op.f('ck_recipes_prep_time_non_negative')),
        sa.CheckConstraint('cook_time >= 0', name=op.f('ck_recipes_cook_time_non_negative')),
        sa.CheckConstraint('servings >= 0', name=op.f('ck_recipes_servings_non_negative')),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE',
                                name=op.f('fk_recipes_user_id_users')),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_recipes')),
    )
    with op.batch_alter_table('recipes', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_recipes_user_id'), ['user_id'], unique=False)

    op.create_table(
        'instructions',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('recipe_id', sa.Integer(), nullable=False),
        sa.Column('step_number', sa.Integer(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.CheckConstraint('step_number >= 1', name=op.f('ck_instructions_step_number_positive')),
        sa.ForeignKeyConstraint(['recipe_id'], ['recipes.id'], ondelete='CASCADE',
                                name=op.f('fk_instructions_recipe_id_recipes')),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_instructions')),
        sa.UniqueConstraint('recipe_id', 'step_number', name='uq_instructions_recipe_step'),
    )
    op.create_table(
        'recipe_ingredients',
        sa.Column('recipe_id', sa.Integer(), nullable=False),
        sa.Column('ingredient_id', sa.Integer(), nullable=False),
        sa.Column('quantity', sa.Float(), nullable=False),
        sa.Column('unit', sa.String(length=50), nullable=False),
        sa.CheckConstraint('quantity > 0', name=op.f('ck_recipe_ingredients_quantity_positive')),
        sa.ForeignKeyConstraint(['ingredient_id'], ['ingredients.id'], ondelete='RESTRICT',
                                name=op.f('fk_recipe_ingredients_ingredient_id_ingredients')),
        sa.ForeignKeyConstraint(['recipe_id'], ['recipes.id'], ondelete='CASCADE',
                                name=op.f('fk_recipe_ingredients_recipe_id_recipes')),
        sa.PrimaryKeyConstraint('recipe_id', 'ingredient_id', name=op.f('pk_recipe_ingredients')),
    )
    with op.batch_alter_table('recipe_ingredients', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_recipe_ingredients_ingredient_id'), ['ingredient_id'], unique=False)

    op.create_table(
        'recipe_categories',
        sa.Column('recipe_id', sa.Integer(), nullable=False),
        sa.Column('category_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['category_id'], ['categories.id'], ondelete='CASCADE',
                                name=op.f('fk_recipe_categories_category_id_categories')),
        sa.ForeignKeyConstraint(['recipe_id'], ['recipes.id'], ondelete='CASCADE',
                                name=op.f('fk_recipe_categories_recipe_id_recipes')),
        sa.PrimaryKeyConstraint('recipe_id', 'category_id', name=op.f('pk_recipe_categories')),
    )
    op.create_table(
        'recipe_tags',
        sa.Column('recipe_id', sa.Integer(), nullable=False),
        sa.Column('tag_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['recipe_id'], ['recipes.id'], ondelete='CASCADE',
                                name=op.f('fk_recipe_tags_recipe_id_recipes')),
        sa.ForeignKeyConstraint(['tag_id'], ['tags.id'], ondelete='CASCADE',
                                name=op.f('fk_recipe_tags_tag_id_tags')),
        sa.PrimaryKeyConstraint('recipe_id', 'tag_id', name=op.f('pk_recipe_tags')),
    )


def downgrade():
    op.drop_table('recipe_tags')
    op.drop_table('recipe_categories')
    with op.batch_alter_table('recipe_ingredients', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_recipe_ingredients_ingredient_id'))
    op.drop_table('recipe_ingredients')
    op.drop_table('instructions')
    with op.batch_alter_table('recipes', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_recipes_user_id'))
    op.drop_table('recipes')
    op.drop_table('seasonalities')
    op.drop_table('tags')
    op.drop_table('categories')
    op.drop_table('ingredients')
    op.drop_table('users')
