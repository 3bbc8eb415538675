import binascii
import re

class StringLiteral(object):
    def __init__(self, value):
        self.value = value

    def sql(self):
        return "'%s'" % self.value.replace("'", "''")

class BinaryLiteral(object):
    """bytea in hex format; assumes standard_conforming_strings is on."""
    def __init__(self, value):
        self.value = value

    def sql(self):
        return "'\\x%s'" % binascii.hexlify(self.value).decode('ascii')

class HexLiteralParser(object):
    def __init__(self, literal):
        self.literal = literal

    def bytes(self):
        m = re.match("^('?)\\\\x((?:[0-9A-Fa-f]{2})*)\\1$", self.literal)
        if not m:
            raise ValueError('input does not look like a bytea hex literal (%.40s)' % self.literal)
        return binascii.unhexlify(m.group(2))
