"""Create the MIS schema."""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa

revision = "0001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None

USER_ROLE = sa.Enum("Administrator", "Editor", "Viewer", name="user_role")
BASELINE_SURVEY_TOOL = sa.Enum("kobo", "manual", "other", name="baseline_survey_tool")
BASELINE_SURVEY_STATUS = sa.Enum(
    "draft", "in_progress", "completed", "archived", name="baseline_survey_status"
)
MONTHLY_REPORT_STATUS = sa.Enum(
    "draft", "submitted", "approved", "feedback", name="monthly_report_status"
)
EVALUATION_TYPE = sa.Enum(
    "baseline", "midterm", "endline", "special", name="evaluation_type"
)
STORY_TYPE = sa.Enum("case", "success", "impact", name="story_type")
FINDING_TYPE = sa.Enum("negative", "positive", name="finding_type")
FINDING_SEVERITY = sa.Enum("minor", "major", "critical", name="finding_severity")
FINDING_STATUS = sa.Enum("pending", "in_progress", "solved", name="finding_status")

ENUMS = (
    USER_ROLE,
    BASELINE_SURVEY_TOOL,
    BASELINE_SURVEY_STATUS,
    MONTHLY_REPORT_STATUS,
    EVALUATION_TYPE,
    STORY_TYPE,
    FINDING_TYPE,
    FINDING_SEVERITY,
    FINDING_STATUS,
)


def _id() -> sa.Column:
    return sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True)


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.DateTime(timezone=True),
        server_default=sa.func.now(),
        nullable=False,
    )


def _project_fk(*, required: bool) -> sa.Column:
    return sa.Column(
        "project_id",
        sa.Integer(),
        sa.ForeignKey(
            "projects.id", ondelete="CASCADE" if required else "SET NULL"
        ),
        nullable=not required,
        index=True,
    )


def _project_child(table: str, value_column: str) -> None:
    op.create_table(
        table,
        _id(),
        _project_fk(required=True),
        sa.Column(value_column, sa.String(length=255), nullable=False),
    )


def upgrade() -> None:
    op.create_table(
        "users",
        _id(),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("role", USER_ROLE, nullable=False),
        sa.Column("organization", sa.String(length=255), nullable=True),
        sa.Column("password_hash", sa.String(length=255), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "user_sessions",
        _id(),
        sa.Column(
            "user_id",
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("token_hash", sa.String(length=64), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        _timestamp("created_at"),
    )
    op.create_index(
        "ix_user_sessions_token_hash", "user_sessions", ["token_hash"], unique=True
    )

    op.create_table(
        "branding_settings",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("company_name", sa.String(length=255), nullable=False),
        sa.Column("logo_data", sa.LargeBinary(), nullable=True),
        sa.Column("logo_mime", sa.String(length=128), nullable=True),
        sa.Column("favicon_data", sa.LargeBinary(), nullable=True),
        sa.Column("favicon_mime", sa.String(length=128), nullable=True),
        _timestamp("updated_at"),
    )

    op.create_table(
        "complaints",
        _id(),
        sa.Column("full_name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=64), nullable=True),
        sa.Column("message", sa.Text(), nullable=False),
        _timestamp("submitted_at"),
    )

    op.create_table(
        "reporting_years",
        sa.Column("year", sa.Integer(), primary_key=True, autoincrement=False),
    )

    op.create_table(
        "sectors",
        _id(),
        sa.Column("sector_key", sa.String(length=128), nullable=False),
        sa.Column("display_name", sa.String(length=255), nullable=False),
        sa.Column("projects", sa.Integer(), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("field_activity", sa.Text(), nullable=True),
        sa.Column("staff", sa.Integer(), nullable=False),
    )
    op.create_index("ix_sectors_sector_key", "sectors", ["sector_key"], unique=True)
    op.create_table(
        "sector_provinces",
        _id(),
        sa.Column(
            "sector_id",
            sa.Integer(),
            sa.ForeignKey("sectors.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("province", sa.String(length=255), nullable=False),
    )
    op.create_table(
        "beneficiary_stats",
        _id(),
        sa.Column(
            "sector_id",
            sa.Integer(),
            sa.ForeignKey("sectors.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("type_key", sa.String(length=32), nullable=False),
        sa.Column("direct", sa.Integer(), nullable=False),
        sa.Column("indirect", sa.Integer(), nullable=False),
    )

    for table in ("cluster_catalog", "sector_catalog", "main_sectors"):
        op.create_table(
            table,
            _id(),
            sa.Column("name", sa.String(length=255), nullable=False),
            sa.Column("description", sa.Text(), nullable=True),
        )
    op.create_table(
        "sub_sectors",
        _id(),
        sa.Column(
            "main_sector_id",
            sa.Integer(),
            sa.ForeignKey("main_sectors.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
    )

    op.create_table(
        "projects",
        _id(),
        sa.Column("code", sa.String(length=64), nullable=True, index=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("donor", sa.String(length=255), nullable=True),
        sa.Column("sector", sa.String(length=255), nullable=True),
        sa.Column("country", sa.String(length=128), nullable=True),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("budget", sa.Float(), nullable=True),
        sa.Column("focal_point", sa.String(length=255), nullable=True),
        sa.Column("goal", sa.Text(), nullable=True),
        sa.Column("objectives", sa.Text(), nullable=True),
        sa.Column("major_achievements", sa.Text(), nullable=True),
        sa.Column("staff", sa.Integer(), nullable=False),
        _timestamp("created_at"),
        _timestamp("updated_at"),
    )
    _project_child("project_provinces", "province")
    _project_child("project_districts", "district")
    _project_child("project_communities", "community")
    _project_child("project_clusters", "cluster")
    _project_child("project_standard_sectors", "standard_sector")
    op.create_table(
        "project_beneficiaries",
        _id(),
        _project_fk(required=True),
        sa.Column("type_key", sa.String(length=32), nullable=False),
        sa.Column("direct", sa.Integer(), nullable=False),
        sa.Column("indirect", sa.Integer(), nullable=False),
        sa.Column("include_in_totals", sa.Boolean(), nullable=False),
    )

    op.create_table(
        "baseline_surveys",
        _id(),
        _project_fk(required=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("tool", BASELINE_SURVEY_TOOL, nullable=False),
        sa.Column("status", BASELINE_SURVEY_STATUS, nullable=False),
        sa.Column("questionnaire_url", sa.String(length=1024), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
    )
    op.create_table(
        "enumerators",
        _id(),
        sa.Column("full_name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("phone", sa.String(length=64), nullable=True),
        sa.Column("province", sa.String(length=255), nullable=True),
    )
    op.create_table(
        "field_visit_reports",
        _id(),
        _project_fk(required=True),
        sa.Column("visit_date", sa.Date(), nullable=False),
        sa.Column("location", sa.String(length=255), nullable=True),
        sa.Column("positive_findings", sa.Text(), nullable=True),
        sa.Column("negative_findings", sa.Text(), nullable=True),
        sa.Column("photo_url", sa.String(length=1024), nullable=True),
        sa.Column("gps_coordinates", sa.String(length=128), nullable=True),
        sa.Column("officer", sa.String(length=255), nullable=True),
        _timestamp("created_at"),
    )
    op.create_table(
        "monthly_reports",
        _id(),
        _project_fk(required=True),
        sa.Column("report_month", sa.String(length=16), nullable=False),
        sa.Column("summary", sa.Text(), nullable=True),
        sa.Column("gaps", sa.Text(), nullable=True),
        sa.Column("recommendations", sa.Text(), nullable=True),
        sa.Column("status", MONTHLY_REPORT_STATUS, nullable=False),
        sa.Column("reviewer", sa.String(length=255), nullable=True),
        sa.Column("feedback", sa.Text(), nullable=True),
        sa.Column("submitted_at", sa.DateTime(timezone=True), nullable=True),
        _timestamp("updated_at"),
    )

    op.create_table(
        "evaluations",
        _id(),
        _project_fk(required=False),
        sa.Column("evaluator_name", sa.String(length=255), nullable=True),
        sa.Column("evaluation_type", EVALUATION_TYPE, nullable=False),
        sa.Column("report_url", sa.String(length=1024), nullable=True),
        sa.Column("findings_summary", sa.Text(), nullable=True),
        sa.Column("completed_at", sa.Date(), nullable=True),
        _timestamp("created_at"),
    )
    op.create_table(
        "stories",
        _id(),
        _project_fk(required=False),
        sa.Column("story_type", STORY_TYPE, nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("quote", sa.Text(), nullable=True),
        sa.Column("summary", sa.Text(), nullable=True),
        sa.Column("photo_url", sa.String(length=1024), nullable=True),
        _timestamp("created_at"),
    )

    op.create_table(
        "findings",
        _id(),
        _project_fk(required=False),
        sa.Column("finding_type", FINDING_TYPE, nullable=False),
        sa.Column("category", sa.String(length=255), nullable=True),
        sa.Column("severity", FINDING_SEVERITY, nullable=False),
        sa.Column("department", sa.String(length=255), nullable=True),
        sa.Column("status", FINDING_STATUS, nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("evidence_url", sa.String(length=1024), nullable=True),
        sa.Column("reminder_due_at", sa.Date(), nullable=True),
        sa.Column("last_reminded_at", sa.DateTime(timezone=True), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
    )
    op.create_table(
        "crm_awareness_records",
        _id(),
        _project_fk(required=False),
        sa.Column("district", sa.String(length=255), nullable=True),
        sa.Column("awareness_date", sa.Date(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        _timestamp("created_at"),
    )

    op.create_table(
        "lessons",
        _id(),
        _project_fk(required=False),
        sa.Column("source", sa.String(length=255), nullable=True),
        sa.Column("lesson", sa.Text(), nullable=False),
        sa.Column("department", sa.String(length=255), nullable=True),
        sa.Column("theme", sa.String(length=255), nullable=True),
        sa.Column("captured_at", sa.Date(), nullable=True),
        _timestamp("created_at"),
    )
    op.create_table(
        "distribution_records",
        _id(),
        _project_fk(required=False),
        sa.Column("assistance_type", sa.String(length=255), nullable=False),
        sa.Column("distribution_date", sa.Date(), nullable=True),
        sa.Column("location", sa.String(length=255), nullable=True),
        sa.Column("target_beneficiaries", sa.Integer(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        _timestamp("created_at"),
    )
    op.create_table(
        "pdm_surveys",
        _id(),
        _project_fk(required=False),
        sa.Column("tool", sa.String(length=255), nullable=True),
        sa.Column("quality_score", sa.Float(), nullable=True),
        sa.Column("quantity_score", sa.Float(), nullable=True),
        sa.Column("satisfaction_score", sa.Float(), nullable=True),
        sa.Column("protection_score", sa.Float(), nullable=True),
        sa.Column("completed_at", sa.Date(), nullable=True),
        _timestamp("created_at"),
    )
    op.create_table(
        "pdm_reports",
        _id(),
        _project_fk(required=False),
        sa.Column("report_date", sa.Date(), nullable=True),
        sa.Column("summary", sa.Text(), nullable=True),
        sa.Column("recommendations", sa.Text(), nullable=True),
        sa.Column("feedback_to_program", sa.Text(), nullable=True),
        _timestamp("created_at"),
    )


def downgrade() -> None:
    for table in (
        "pdm_reports",
        "pdm_surveys",
        "distribution_records",
        "lessons",
        "crm_awareness_records",
        "findings",
        "stories",
        "evaluations",
        "monthly_reports",
        "field_visit_reports",
        "enumerators",
        "baseline_surveys",
        "project_beneficiaries",
        "project_standard_sectors",
        "project_clusters",
        "project_communities",
        "project_districts",
        "project_provinces",
        "projects",
        "sub_sectors",
        "main_sectors",
        "sector_catalog",
        "cluster_catalog",
        "beneficiary_stats",
        "sector_provinces",
        "sectors",
        "reporting_years",
        "complaints",
        "branding_settings",
        "user_sessions",
        "users",
    ):
        op.drop_table(table)

    bind = op.get_bind()
    for enum in ENUMS:
        enum.drop(bind, checkfirst=True)
