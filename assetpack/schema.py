import sqlalchemy as sa
import sqlalchemy.dialects.postgresql as sa_postgresql

DEFAULT_TABLE_NAME = 'web_assets'

def asset_table(name=DEFAULT_TABLE_NAME, metadata=None):
    if metadata is None:
        metadata = sa.MetaData()
    return sa.Table(
        name, metadata,
        sa.Column('path', sa.UnicodeText, primary_key=True),
        sa.Column('content_type', sa.UnicodeText, nullable=False),
        sa.Column('etag', sa.String(32), nullable=False),
        sa.Column('content', sa_postgresql.BYTEA, nullable=False)
    )
