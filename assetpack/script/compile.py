import logging
import sys

log = logging.getLogger(__name__)

def compile_assets(config):
    from assetpack.asset import AssetWalker, build_assets
    from assetpack.schema import asset_table
    from assetpack.sql import SQLEmitter

    log.info('Building assets from %s...', config.asset_dir)

    paths = AssetWalker(config.asset_dir).walk()
    assets = build_assets(config.asset_dir, paths)

    if SQLEmitter(asset_table(config.table_name)).write(assets, config.output_file):
        log.info('Done! SQL generated at %s', config.output_file)
    else:
        log.info('No assets found.')
    return assets

def main(argv=None):
    from assetpack.asset import AssetPackError
    from assetpack.config import AssetPackConfig

    if argv is None:
        argv = sys.argv
    logging.basicConfig(stream=sys.stderr, level=logging.INFO, format='%(message)s')

    if len(argv) > 2:
        sys.stderr.write('usage: %s [CONFIG_INI]\n' % argv[0])
        return 127

    try:
        if len(argv) == 2:
            config = AssetPackConfig.from_ini(argv[1])
        else:
            config = AssetPackConfig()
        compile_assets(config)
    except AssetPackError as e:
        log.error('%s', e)
        return 1
    return 0

if __name__ == '__main__':
    sys.exit(main())
