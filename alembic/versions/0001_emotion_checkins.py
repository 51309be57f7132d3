"""emotion check-ins and crisis interventions

Revision ID: 0001
Revises:
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None

INTERVENTION_TYPES = ("alert_shown", "expert_contacted", "resources_accessed")
USER_RESPONSES = ("email_sent", "accepted", "dismissed", "completed")


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("first_name", sa.String(100)),
        sa.Column("last_name", sa.String(100)),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_table(
        "emotion_checkin_records",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Uuid(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("record_date", sa.Date(), nullable=False),
        sa.Column("record_time", sa.Time(), nullable=False),
        sa.Column("selected_struggles", sa.JSON(), nullable=False),
        sa.Column("selected_positive_moments", sa.JSON(), nullable=False),
        sa.Column("selected_concerning_thoughts", sa.JSON(), nullable=False),
        sa.Column("grateful_for", sa.Text()),
        sa.Column("proud_of_today", sa.Text()),
        sa.Column("tomorrow_goal", sa.Text()),
        sa.Column("additional_notes", sa.Text()),
        sa.Column("crisis_alert_triggered", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("entered_via_voice", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_emotion_checkin_records_user_id", "emotion_checkin_records", ["user_id"])
    op.create_index("ix_emotion_checkin_records_record_date", "emotion_checkin_records", ["record_date"])
    op.create_table(
        "crisis_interventions",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("user_id", sa.Uuid(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column(
            "checkin_record_id", sa.Uuid(),
            sa.ForeignKey("emotion_checkin_records.id", ondelete="CASCADE"),
            nullable=False, unique=True,
        ),
        sa.Column("intervention_type", sa.Enum(*INTERVENTION_TYPES, name="crisis_intervention_type"), nullable=False),
        sa.Column("intervention_details", sa.JSON(), nullable=False),
        sa.Column("user_response", sa.Enum(*USER_RESPONSES, name="crisis_user_response")),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime()),
    )
    op.create_index("ix_crisis_interventions_user_id", "crisis_interventions", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_crisis_interventions_user_id", table_name="crisis_interventions")
    op.drop_table("crisis_interventions")
    op.drop_index("ix_emotion_checkin_records_record_date", table_name="emotion_checkin_records")
    op.drop_index("ix_emotion_checkin_records_user_id", table_name="emotion_checkin_records")
    op.drop_table("emotion_checkin_records")
    op.drop_table("users")
    sa.Enum(name="crisis_user_response").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="crisis_intervention_type").drop(op.get_bind(), checkfirst=True)
