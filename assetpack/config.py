import configparser

from assetpack.asset import ConfigError
from assetpack.schema import DEFAULT_TABLE_NAME

class AssetPackConfig(object):
    keys = ('asset_dir', 'output_file', 'table_name')

    def __init__(self, asset_dir='./public', output_file='./docker/initdb/02_assets.sql', table_name=DEFAULT_TABLE_NAME):
        self.asset_dir = asset_dir
        self.output_file = output_file
        self.table_name = table_name

    @classmethod
    def from_ini(cls, filename, section='assetpack'):
        config = configparser.ConfigParser()
        try:
            if not config.read(filename, encoding='utf-8'):
                raise ConfigError(filename, 'no such file')
        except configparser.Error as e:
            raise ConfigError(filename, e.message) from e
        except UnicodeDecodeError as e:
            raise ConfigError(filename, str(e)) from e
        if not config.has_section(section):
            raise ConfigError(filename, 'missing section [%s]' % section)
        return cls(**dict((k, config.get(section, k)) for k in cls.keys if config.has_option(section, k)))

    def __repr__(self):
        return '<AssetPackConfig %s -> %s (%s)>' % (self.asset_dir, self.output_file, self.table_name)
