"""initial creativahub schema

Revision ID: a1c3e5f70001
Revises:
Create Date: 2026-10-19 09:00:00.000000
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = 'a1c3e5f70001'
down_revision = None
branch_labels = None
depends_on = None


user_role = sa.Enum('student', 'teacher', 'admin', name='userroleenum')
course_status = sa.Enum('draft', 'published', 'archived', name='coursestatusenum')
assignment_status = sa.Enum('draft', 'published', 'closed', name='assignmentstatusenum')
submission_status = sa.Enum('draft', 'submitted', 'graded', name='submissionstatusenum')


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        'user',
        *_timestamps(),
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('full_name', sa.String(), nullable=False),
        sa.Column('role', user_role, nullable=False),
        sa.Column('avatar_url', sa.String(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
    )
    op.create_index('ix_user_email', 'user', ['email'], unique=True)
    op.create_index('ix_user_role', 'user', ['role'])

    op.create_table(
        'course',
        *_timestamps(),
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('teacher_id', sa.Integer(), sa.ForeignKey('user.id'), nullable=False),
        sa.Column('thumbnail_url', sa.String(), nullable=True),
        sa.Column('status', course_status, nullable=False),
    )
    op.create_index('ix_course_teacher_id', 'course', ['teacher_id'])
    op.create_index('ix_course_status', 'course', ['status'])

    op.create_table(
        'courseenrollment',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('course_id', sa.Integer(), sa.ForeignKey('course.id'), nullable=False),
        sa.Column('student_id', sa.Integer(), sa.ForeignKey('user.id'), nullable=False),
        sa.Column('enrolled_at', sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint('course_id', 'student_id', name='uq_course_enrollment'),
    )
    op.create_index('ix_courseenrollment_course_id', 'courseenrollment', ['course_id'])
    op.create_index('ix_courseenrollment_student_id', 'courseenrollment', ['student_id'])

    op.create_table(
        'learningmaterial',
        *_timestamps(),
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('course_id', sa.Integer(), sa.ForeignKey('course.id'), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('content_url', sa.String(), nullable=True),
        sa.Column('file_url', sa.String(), nullable=True),
        sa.Column('material_type', sa.String(), nullable=False),
        sa.Column('order_index', sa.Integer(), nullable=False),
    )
    op.create_index('ix_learningmaterial_course_id', 'learningmaterial', ['course_id'])

    op.create_table(
        'assignment',
        *_timestamps(),
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('course_id', sa.Integer(), sa.ForeignKey('course.id'), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('due_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('max_score', sa.Numeric(precision=5, scale=2), nullable=False),
        sa.Column('status', assignment_status, nullable=False),
    )
    op.create_index('ix_assignment_course_id', 'assignment', ['course_id'])
    op.create_index('ix_assignment_status', 'assignment', ['status'])

    op.create_table(
        'assignmentsubmission',
        *_timestamps(),
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('assignment_id', sa.Integer(), sa.ForeignKey('assignment.id'), nullable=False),
        sa.Column('student_id', sa.Integer(), sa.ForeignKey('user.id'), nullable=False),
        sa.Column('submission_url', sa.String(), nullable=True),
        sa.Column('submission_text', sa.String(), nullable=True),
        sa.Column('score', sa.Numeric(precision=5, scale=2), nullable=True),
        sa.Column('feedback', sa.String(), nullable=True),
        sa.Column('status', submission_status, nullable=False),
        sa.Column('submitted_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('graded_at', sa.DateTime(timezone=True), nullable=True),
        sa.UniqueConstraint('assignment_id', 'student_id', name='uq_assignment_submission'),
    )
    op.create_index('ix_assignmentsubmission_assignment_id', 'assignmentsubmission', ['assignment_id'])
    op.create_index('ix_assignmentsubmission_student_id', 'assignmentsubmission', ['student_id'])
    op.create_index('ix_assignmentsubmission_status', 'assignmentsubmission', ['status'])

    op.create_table(
        'portfolioproject',
        *_timestamps(),
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('student_id', sa.Integer(), sa.ForeignKey('user.id'), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('project_url', sa.String(), nullable=True),
        sa.Column('thumbnail_url', sa.String(), nullable=True),
        sa.Column('tags', sa.String(), nullable=True),
        sa.Column('is_public', sa.Boolean(), nullable=False),
    )
    op.create_index('ix_portfolioproject_student_id', 'portfolioproject', ['student_id'])


def downgrade() -> None:
    op.drop_table('portfolioproject')
    op.drop_table('assignmentsubmission')
    op.drop_table('assignment')
    op.drop_table('learningmaterial')
    op.drop_table('courseenrollment')
    op.drop_table('course')
    op.drop_table('user')
    for enum in (submission_status, assignment_status, course_status, user_role):
        enum.drop(op.get_bind(), checkfirst=True)
