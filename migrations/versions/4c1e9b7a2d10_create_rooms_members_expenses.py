"""create rooms, members and expenses

Revision ID: 4c1e9b7a2d10
Revises:
Create Date: 2026-10-18 10:12:44.518302

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect

# revision identifiers, used by Alembic.
revision = '4c1e9b7a2d10'
down_revision = None
branch_labels = None
depends_on = None


def _table_exists(bind, name):
    inspector = inspect(bind)
    return name in inspector.get_table_names()


def upgrade():
    bind = op.get_bind()

    # create_all() at startup may already have built the schema
    if not _table_exists(bind, 'rooms'):
        op.create_table(
            'rooms',
            sa.Column('id', sa.String(length=36), nullable=False),
            sa.Column('code', sa.String(length=6), nullable=False),
            sa.Column('name', sa.String(length=120), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=False),
            sa.PrimaryKeyConstraint('id'),
        )
        with op.batch_alter_table('rooms', schema=None) as batch_op:
            batch_op.create_index(batch_op.f('ix_rooms_code'), ['code'], unique=True)

    if not _table_exists(bind, 'members'):
        op.create_table(
            'members',
            sa.Column('id', sa.String(length=36), nullable=False),
            sa.Column('room_id', sa.String(length=36), nullable=False),
            sa.Column('name', sa.String(length=80), nullable=False),
            sa.Column('name_key', sa.String(length=80), nullable=False),
            sa.Column('seat', sa.Integer(), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=False),
            sa.CheckConstraint('seat BETWEEN 1 AND 2', name='ck_member_seat'),
            sa.ForeignKeyConstraint(['room_id'], ['rooms.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('room_id', 'name_key', name='uq_member_room_name'),
            sa.UniqueConstraint('room_id', 'seat', name='uq_member_room_seat'),
        )
        with op.batch_alter_table('members', schema=None) as batch_op:
            batch_op.create_index(batch_op.f('ix_members_room_id'), ['room_id'], unique=False)

    if not _table_exists(bind, 'expenses'):
        op.create_table(
            'expenses',
            sa.Column('id', sa.String(length=36), nullable=False),
            sa.Column('room_id', sa.String(length=36), nullable=False),
            sa.Column('category', sa.String(length=32), nullable=False),
            sa.Column('description', sa.String(length=255), nullable=True),
            sa.Column('amount', sa.Float(), nullable=False),
            sa.Column('paid_by', sa.String(length=36), nullable=False),
            sa.Column('split_type', sa.String(length=16), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=False),
            sa.CheckConstraint('amount > 0', name='ck_expense_amount_positive'),
            sa.ForeignKeyConstraint(['paid_by'], ['members.id'], ondelete='CASCADE'),
            sa.ForeignKeyConstraint(['room_id'], ['rooms.id'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id'),
        )
        with op.batch_alter_table('expenses', schema=None) as batch_op:
            batch_op.create_index(batch_op.f('ix_expenses_room_id'), ['room_id'], unique=False)


def downgrade():
    bind = op.get_bind()

    if _table_exists(bind, 'expenses'):
        with op.batch_alter_table('expenses', schema=None) as batch_op:
            batch_op.drop_index(batch_op.f('ix_expenses_room_id'))
        op.drop_table('expenses')

    if _table_exists(bind, 'members'):
        with op.batch_alter_table('members', schema=None) as batch_op:
            batch_op.drop_index(batch_op.f('ix_members_room_id'))
        op.drop_table('members')

    if _table_exists(bind, 'rooms'):
        with op.batch_alter_table('rooms', schema=None) as batch_op:
            batch_op.drop_index(batch_op.f('ix_rooms_code'))
        op.drop_table('rooms')
