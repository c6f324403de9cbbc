"""Add expected salary, joining date and notes to job_applications.

Revision ID: 004_job_application_fields
Revises: 003_profile_fields
Create Date: 2025-04-21
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '004_job_application_fields'
down_revision: Union[str, None] = '003_profile_fields'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.add_column(
        'job_applications',
        sa.Column('expected_salary', sa.Float(), nullable=True),
    )
    op.add_column(
        'job_applications',
        sa.Column('preferred_joining_date', sa.DateTime(timezone=True), nullable=True),
    )
    op.add_column(
        'job_applications',
        sa.Column('additional_notes', sa.Text(), nullable=True),
    )


def downgrade() -> None:
    op.drop_column('job_applications', 'additional_notes')
    op.drop_column('job_applications', 'preferred_joining_date')
    op.drop_column('job_applications', 'expected_salary')
