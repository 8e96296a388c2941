# alembic/versions/0001_initial.py
# initial schema: users, requests, items, bookings, comments
from alembic import op
import sqlalchemy as sa

revision = '0001_initial'
down_revision = None
branch_labels = None
depends_on = None

BOOKING_STATUSES = ('WAITING', 'APPROVED', 'REJECTED', 'CANCELED')


def upgrade():
    op.create_table('users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.UniqueConstraint('email', name='uq_users_email'),
    )
    op.create_table('requests',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('requestor_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('created', sa.DateTime(), nullable=False),
    )
    op.create_table('items',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('owner_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('available', sa.Boolean(), nullable=False),
        sa.Column('request_id', sa.Integer(), sa.ForeignKey('requests.id', ondelete='SET NULL'), nullable=True, index=True),
    )
    op.create_table('bookings',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('start_date', sa.DateTime(), nullable=False, index=True),
        sa.Column('end_date', sa.DateTime(), nullable=False),
        sa.Column('item_id', sa.Integer(), sa.ForeignKey('items.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('booker_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('status', sa.Enum(*BOOKING_STATUSES, name='booking_status', native_enum=False, length=20), nullable=False, index=True),
    )
    op.create_table('comments',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('text', sa.Text(), nullable=False),
        sa.Column('item_id', sa.Integer(), sa.ForeignKey('items.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('author_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('created', sa.DateTime(), nullable=False),
    )


def downgrade():
    op.drop_table('comments')
    op.drop_table('bookings')
    op.drop_table('items')
    op.drop_table('requests')
    op.drop_table('users')
