"""create employees, criteria and evaluation_scores

Revision ID: 001
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "employees",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("position", sa.String(), nullable=True),
        sa.Column("department", sa.String(), nullable=True),
        sa.Column("email", sa.String(), nullable=True),
        sa.Column("hire_date", sa.Date(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_employees_name", "employees", ["name"], unique=False)

    op.create_table(
        "criteria",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False, unique=True),
        sa.Column("category", sa.String(), nullable=False),
        sa.Column("type", sa.Enum("Benefit", "Cost", name="criterion_type"), nullable=False),
        sa.Column("weight", sa.Float(), nullable=False),
        sa.Column("scale", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        "evaluation_scores",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column(
            "employee_id",
            sa.String(),
            sa.ForeignKey("employees.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "criteria_id",
            sa.String(),
            sa.ForeignKey("criteria.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("score", sa.Float(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.UniqueConstraint("employee_id", "criteria_id", name="uq_evaluation_scores_employee_criteria"),
    )
    op.create_index("ix_evaluation_scores_employee_id", "evaluation_scores", ["employee_id"], unique=False)
    op.create_index("ix_evaluation_scores_criteria_id", "evaluation_scores", ["criteria_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_evaluation_scores_criteria_id", table_name="evaluation_scores")
    op.drop_index("ix_evaluation_scores_employee_id", table_name="evaluation_scores")
    op.drop_table("evaluation_scores")
    op.drop_table("criteria")
    op.drop_index("ix_employees_name", table_name="employees")
    op.drop_table("employees")
    sa.Enum(name="criterion_type").drop(op.get_bind(), checkfirst=True)
