import hashlib
import logging
import mimetypes
import os

log = logging.getLogger(__name__)

class AssetPackError(Exception):
    reason = 'asset packing failed'

    def __init__(self, path, detail=None):
        super(AssetPackError, self).__init__(path, detail)
        self.path = path
        self.detail = detail

    def __str__(self):
        if self.detail:
            return '%s: %s (%s)' % (self.reason, self.path, self.detail)
        return '%s: %s' % (self.reason, self.path)

class FileSystemError(AssetPackError):
    reason = 'cannot list directory'

class FileReadError(AssetPackError):
    reason = 'cannot read file'

class EncodingError(AssetPackError):
    reason = 'cannot encode asset'

class WriteError(AssetPackError):
    reason = 'cannot write output'

class ConfigError(AssetPackError):
    reason = 'cannot load configuration'


class Asset(object):
    def __init__(self, path=None, content_type=None, etag=None, content=None):
        self.path = path
        self.content_type = content_type
        self.etag = etag
        self.content = content

    @property
    def size(self):
        return len(self.content)

    def __repr__(self):
        return '<Asset %s (%s, %d bytes)>' % (self.path, self.content_type, self.size)


class AssetWalker(object):
    """Yields every regular file below root.

    Traversal keeps its own stack, so deep trees do not exhaust the
    interpreter's recursion limit.  Entries of a directory are visited in
    name order and a directory's files come before those of its
    subdirectories.
    """
    def __init__(self, root):
        self.root = root

    def walk(self):
        seen = set()
        stack = [self.root]
        while stack:
            dirpath = stack.pop()
            try:
                st = os.stat(dirpath)
                if (st.st_dev, st.st_ino) in seen:
                    log.debug('already visited %s', dirpath)
                    continue
                seen.add((st.st_dev, st.st_ino))
                log.debug('entering %s', dirpath)
                with os.scandir(dirpath) as it:
                    entries = sorted(it, key=lambda e: e.name)
                files, subdirs = [], []
                for entry in entries:
                    if entry.is_dir():
                        subdirs.append(entry.path)
                    elif entry.is_file():
                        files.append(entry.path)
                    else:
                        log.debug('skipping %s: not a regular file', entry.path)
            except OSError as e:
                raise FileSystemError(dirpath, e.strerror) from e

            for path in files:
                yield path
            stack.extend(reversed(subdirs))


class WebPathPolicy(object):
    def __init__(self, root, path):
        self.root = root
        self.path = path

    def get(self):
        rel = os.path.relpath(self.path, self.root)
        parts = rel.split(os.sep)
        if os.altsep:
            parts = [p for part in parts for p in part.split(os.altsep)]
        return '/' + '/'.join(parts)


class ContentTypeGuesser(object):
    default = 'application/octet-stream'

    # web types missing from, or spelled differently in, the stock table
    overrides = {
        '.js': 'application/javascript',
        '.mjs': 'application/javascript',
        '.json': 'application/json',
        '.map': 'application/json',
        '.webmanifest': 'application/manifest+json',
        '.wasm': 'application/wasm',
        '.woff': 'font/woff',
        '.woff2': 'font/woff2',
        '.ttf': 'font/ttf',
        '.otf': 'font/otf',
        '.ico': 'image/x-icon',
        '.svg': 'image/svg+xml',
        '.webp': 'image/webp',
        '.avif': 'image/avif',
        '.gz': 'application/gzip',
        '.bz2': 'application/x-bzip2',
        '.xz': 'application/x-xz',
        '.zip': 'application/zip',
    }

    # built-in table only; /etc/mime.types differs between hosts
    types = mimetypes.MimeTypes(filenames=())

    def __init__(self, filename):
        self.filename = filename

    def guess(self):
        try:
            ext = os.path.splitext(os.path.basename(self.filename))[1].lower()
        except (TypeError, ValueError) as e:
            raise EncodingError(self.filename, str(e)) from e
        if not ext:
            return self.default
        if ext in self.overrides:
            return self.overrides[ext]
        return self.types.types_map[True].get(ext, self.default)


class AssetBuilder(object):
    def __init__(self, root):
        self.root = root

    def build(self, path):
        web_path = WebPathPolicy(self.root, path).get()
        content_type = ContentTypeGuesser(path).guess()

        try:
            with open(path, 'rb') as f:
                content = f.read()
        except OSError as e:
            raise FileReadError(path, e.strerror) from e

        try:
            etag = hashlib.md5(content, usedforsecurity=False).hexdigest()
        except ValueError as e:
            raise EncodingError(path, str(e)) from e

        asset = Asset(path=web_path, content_type=content_type, etag=etag, content=content)
        log.info('Packed: %s (%.2f KB)', asset.path, asset.size / 1024.0)
        return asset


def build_assets(root, paths):
    builder = AssetBuilder(root)
    return [builder.build(path) for path in paths]
