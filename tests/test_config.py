import os
import unittest

from assetpack.asset import ConfigError
from assetpack.config import AssetPackConfig

from .helpers import AssetTreeMixin


class AssetPackConfigTest(AssetTreeMixin, unittest.TestCase):

    def write_ini(self, text):
        path = os.path.join(self.workdir, 'assetpack.ini')
        with open(path, 'w', encoding='utf-8') as f:
            f.write(text)
        return path

    def test_defaults(self):
        config = AssetPackConfig()
        self.assertEqual('./public', config.asset_dir)
        self.assertEqual('./docker/initdb/02_assets.sql', config.output_file)
        self.assertEqual('web_assets', config.table_name)

    def test_from_ini(self):
        path = self.write_ini(
            '[assetpack]\n'
            'asset_dir = /srv/www\n'
            'output_file = /tmp/out.sql\n'
            'table_name = static_files\n')
        config = AssetPackConfig.from_ini(path)
        self.assertEqual('/srv/www', config.asset_dir)
        self.assertEqual('/tmp/out.sql', config.output_file)
        self.assertEqual('static_files', config.table_name)

    def test_from_ini_partial_keeps_defaults(self):
        path = self.write_ini('[assetpack]\nasset_dir = dist\n')
        config = AssetPackConfig.from_ini(path)
        self.assertEqual('dist', config.asset_dir)
        self.assertEqual('./docker/initdb/02_assets.sql', config.output_file)
        self.assertEqual('web_assets', config.table_name)

    def test_from_ini_other_section(self):
        path = self.write_ini('[build]\nasset_dir = dist\n')
        self.assertEqual('dist', AssetPackConfig.from_ini(path, section='build').asset_dir)

    def test_missing_file(self):
        with self.assertRaises(ConfigError):
            AssetPackConfig.from_ini(os.path.join(self.workdir, 'nope.ini'))

    def test_missing_section(self):
        path = self.write_ini('[other]\nasset_dir = dist\n')
        with self.assertRaises(ConfigError) as cm:
            AssetPackConfig.from_ini(path)
        self.assertIn('[assetpack]', str(cm.exception))

    def test_undecodable_file(self):
        path = os.path.join(self.workdir, 'assetpack.ini')
        with open(path, 'wb') as f:
            f.write(b'[assetpack]\nasset_dir = \xff\xfe\n')
        with self.assertRaises(ConfigError):
            AssetPackConfig.from_ini(path)

    def test_malformed_file(self):
        path = self.write_ini('asset_dir = dist\n')
        with self.assertRaises(ConfigError):
            AssetPackConfig.from_ini(path)
