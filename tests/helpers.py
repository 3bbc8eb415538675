import os
import shutil
import tempfile


class AssetTreeMixin(object):
    """Creates a scratch asset directory per test."""

    def setUp(self):
        super(AssetTreeMixin, self).setUp()
        self.workdir = tempfile.mkdtemp()
        self.root = os.path.join(self.workdir, 'public')
        os.mkdir(self.root)

    def tearDown(self):
        shutil.rmtree(self.workdir)
        super(AssetTreeMixin, self).tearDown()

    def put(self, relpath, content):
        path = os.path.join(self.root, *relpath.split('/'))
        parent = os.path.dirname(path)
        if not os.path.isdir(parent):
            os.makedirs(parent)
        with open(path, 'wb') as f:
            f.write(content)
        return path
