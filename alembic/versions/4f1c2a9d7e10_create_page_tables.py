"""Create customers, templates, pages and page_elements tables

Revision ID: 4f1c2a9d7e10
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID


# revision identifiers, used by Alembic.
revision: str = '4f1c2a9d7e10'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ELEMENT_TYPES = ('TEXT', 'IMAGE', 'COLOR', 'LINK')


def upgrade() -> None:
    op.create_table(
        'customers',
        sa.Column('id', UUID(as_uuid=True), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email', name='uq_customers_email'),
    )

    op.create_table(
        'templates',
        sa.Column('id', UUID(as_uuid=True), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('thumbnail', sa.String(length=2048), nullable=True),
        sa.Column('html_content', sa.Text(), nullable=False),
        sa.Column('css_content', sa.Text(), nullable=False, server_default=''),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table(
        'pages',
        sa.Column('id', UUID(as_uuid=True), nullable=False),
        sa.Column('template_id', UUID(as_uuid=True), nullable=False),
        sa.Column('customer_id', UUID(as_uuid=True), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('slug', sa.String(length=255), nullable=False),
        sa.Column('custom_css', sa.Text(), nullable=True),
        sa.Column('theme', sa.Text(), nullable=True),
        sa.Column('is_published', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['template_id'], ['templates.id'], ondelete='RESTRICT'),
        sa.ForeignKeyConstraint(['customer_id'], ['customers.id'], ondelete='CASCADE'),
        sa.UniqueConstraint('slug', name='uq_pages_slug'),
    )
    op.create_index('ix_pages_template_id', 'pages', ['template_id'])
    op.create_index('ix_pages_customer_id', 'pages', ['customer_id'])

    op.create_table(
        'page_elements',
        sa.Column('id', UUID(as_uuid=True), nullable=False),
        sa.Column('page_id', UUID(as_uuid=True), nullable=False),
        sa.Column('element_key', sa.String(length=255), nullable=False),
        sa.Column('type', sa.Enum(*ELEMENT_TYPES, name='page_element_type'), nullable=False),
        sa.Column('content', sa.Text(), nullable=False, server_default=''),
        sa.Column('label', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['page_id'], ['pages.id'], ondelete='CASCADE'),
        sa.UniqueConstraint('page_id', 'element_key', name='uq_page_elements_page_key'),
    )


def downgrade() -> None:
    op.drop_table('page_elements')
    sa.Enum(name='page_element_type').drop(op.get_bind(), checkfirst=True)
    op.drop_index('ix_pages_customer_id', table_name='pages')
    op.drop_index('ix_pages_template_id', table_name='pages')
    op.drop_table('pages')
    op.drop_table('templates')
    op.drop_table('customers')
