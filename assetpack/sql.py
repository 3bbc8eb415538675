import logging

import sqlalchemy.dialects.postgresql as sa_postgresql

from assetpack.asset import EncodingError, WriteError
from assetpack.tools import BinaryLiteral, StringLiteral

log = logging.getLogger(__name__)

class SQLEmitter(object):
    """Renders assets into a script that replaces the contents of table.

    The script is a TRUNCATE followed by one multi-row INSERT.  Nothing is
    rendered for an empty asset list, so an existing script is never
    replaced by one that only clears the table.
    """
    dialect = sa_postgresql.dialect()

    def __init__(self, table):
        self.table = table

    def render(self, assets):
        if not assets:
            return None

        preparer = self.dialect.identifier_preparer
        table = preparer.format_table(self.table)
        columns = ', '.join(preparer.quote(c.name) for c in self.table.columns)

        rows = [self._row(asset) for asset in assets]
        return 'TRUNCATE TABLE %s;\nINSERT INTO %s (%s) VALUES\n%s;\n' % (
            table, table, columns, ',\n'.join(rows))

    def _row(self, asset):
        return '(%s, %s, %s, %s)' % (
            StringLiteral(asset.path).sql(),
            StringLiteral(asset.content_type).sql(),
            StringLiteral(asset.etag).sql(),
            BinaryLiteral(asset.content).sql())

    def write(self, assets, output_file):
        sql = self.render(assets)
        if sql is None:
            log.debug('nothing to write to %s', output_file)
            return False

        try:
            data = sql.encode('utf-8')
        except UnicodeEncodeError as e:
            raise EncodingError(output_file, str(e)) from e

        try:
            with open(output_file, 'wb') as f:
                f.write(data)
        except OSError as e:
            raise WriteError(output_file, e.strerror) from e
        log.debug('wrote %d rows (%d bytes) to %s', len(assets), len(data), output_file)
        return True
