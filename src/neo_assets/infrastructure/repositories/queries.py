"""Asset SQL query constants.

All queries are parameterized by schema and table name; values are bound
positionally with asyncpg ($1, $2, ...).
"""

ASSETS_TABLE_CREATE = """
    CREATE TABLE IF NOT EXISTS {schema}.{table} (
        id UUID PRIMARY KEY,
        name TEXT NOT NULL,
        url TEXT NOT NULL,
        key TEXT,
        bucket TEXT,
        region TEXT,
        filesize BIGINT NOT NULL DEFAULT 0,
        mimetype TEXT,
        type TEXT NOT NULL,
        is_private BOOLEAN NOT NULL DEFAULT FALSE,
        width INTEGER,
        height INTEGER,
        format TEXT,
        thumbnail_url TEXT,
        thumbnail_key TEXT,
        user_id TEXT,
        admin_id TEXT,
        created_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
    )
"""

ASSETS_OWNER_INDEXES_CREATE = """
    CREATE INDEX IF NOT EXISTS {table}_user_id_idx ON {schema}.{table} (user_id);
    CREATE INDEX IF NOT EXISTS {table}_admin_id_idx ON {schema}.{table} (admin_id)
"""

ASSET_INSERT = """
    INSERT INTO {schema}.{table} (
        id, name, url, key, bucket, region, filesize, mimetype, type,
        is_private, width, height, format, thumbnail_url, thumbnail_key,
        user_id, admin_id, created_at
    ) VALUES (
        $1, $2, $3, $4, $5, $6, $7, $8, $9, $10, $11, $12, $13, $14, $15,
        $16, $17, $18
    )
    RETURNING *
"""

ASSET_GET_BY_ID = """
    SELECT * FROM {schema}.{table}
    WHERE id = $1
"""

# WHERE clause is assembled from whitelisted column names
ASSET_LIST = """
    SELECT * FROM {schema}.{table}
    {where}
    ORDER BY created_at DESC
"""

ASSET_DELETE = """
    DELETE FROM {schema}.{table}
    WHERE id = $1
"""
