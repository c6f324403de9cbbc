"""Add profile page fields to drivers and fleet_owners.

Revision ID: 003_profile_fields
Revises: 002_marketplace
Create Date: 2025-04-02

Drivers gain profile_image, about, location, availability and skills;
fleet owners gain profile_image, about, location, contact_email,
business_type and reg_number.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '003_profile_fields'
down_revision: Union[str, None] = '002_marketplace'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_DRIVER_TEXT = ('profile_image', 'about', 'location', 'availability')
_FLEET_OWNER_TEXT = (
    'profile_image', 'about', 'location', 'contact_email',
    'business_type', 'reg_number',
)


def upgrade() -> None:
    for name in _DRIVER_TEXT:
        op.add_column('drivers', sa.Column(name, sa.Text(), nullable=True))
    op.add_column(
        'drivers',
        sa.Column('skills', sa.JSON(), nullable=False, server_default='[]'),
    )
    for name in _FLEET_OWNER_TEXT:
        op.add_column('fleet_owners', sa.Column(name, sa.Text(), nullable=True))


def downgrade() -> None:
    for name in reversed(_FLEET_OWNER_TEXT):
        op.drop_column('fleet_owners', name)
    op.drop_column('drivers', 'skills')
    for name in reversed(_DRIVER_TEXT):
        op.drop_column('drivers', name)
