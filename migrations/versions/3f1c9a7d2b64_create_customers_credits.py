"""create customers, credits and changelogs

Revision ID: 3f1c9a7d2b64
Revises: 
Create Date: 2025-09-02 14:21:37.118402

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f1c9a7d2b64'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'customers',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('last_name', sa.String(length=100), nullable=False),
        sa.Column('cpf', sa.String(length=11), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('income', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('zip_code', sa.String(length=20), nullable=False),
        sa.Column('street', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('cpf'),
        sa.UniqueConstraint('email')
    )
    op.create_table(
        'credits',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('credit_code', sa.Uuid(), nullable=False),
        sa.Column('credit_value', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.Column('day_first_installment', sa.Date(), nullable=False),
        sa.Column('number_of_installments', sa.Integer(), nullable=False),
        sa.Column('status', sa.Enum('IN_PROGRESS', 'APPROVED', 'REJECT', name='creditstatus'), nullable=False),
        sa.Column('customer_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['customer_id'], ['customers.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('credit_code')
    )
    op.create_table(
        'changelogs',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('entity_type', sa.String(length=50), nullable=True),
        sa.Column('entity_id', sa.Integer(), nullable=True),
        sa.Column('action', sa.String(length=50), nullable=True),
        sa.Column('timestamp', sa.DateTime(), nullable=True),
        sa.Column('details', sa.JSON(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )


def downgrade():
    op.drop_table('changelogs')
    op.drop_table('credits')
    op.drop_table('customers')
    sa.Enum(name='creditstatus').drop(op.get_bind(), checkfirst=True)
