"""create avisos table

Revision ID: 0001
Revises:
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'avisos',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('titulo', sa.String(200), nullable=False),
        sa.Column('mensagem', sa.String(1000), nullable=False),
        sa.Column('ativo', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('data_criacao', sa.DateTime(), nullable=False),
        sa.Column('data_modificacao', sa.DateTime(), nullable=True),
    )
    # listagem e consultas filtram sempre por ativo
    op.create_index('ix_avisos_ativo_data_criacao', 'avisos', ['ativo', 'data_criacao'])


def downgrade() -> None:
    op.drop_index('ix_avisos_ativo_data_criacao', table_name='avisos')
    op.drop_table('avisos')
