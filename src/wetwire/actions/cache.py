import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class CacheSchema(wetwire.contract.InputsSchema):
    path = marshmallow.fields.String()
    key = marshmallow.fields.String()
    restore_keys = marshmallow.fields.String(data_key='restore-keys')
    upload_chunk_size = wetwire.utils.Integer(
        data_key='upload-chunk-size',
    )
    enable_cross_os_archive = wetwire.utils.Boolean(
        data_key='enableCrossOsArchive',
    )
    fail_on_cache_miss = wetwire.utils.Boolean(
        data_key='fail-on-cache-miss',
    )
    lookup_only = wetwire.utils.Boolean(data_key='lookup-only')
    save_always = wetwire.utils.Boolean(data_key='save-always')


@attr.s(frozen=True)
class Cache(wetwire.contract.Action):
    action_reference = 'actions/cache@v4'
    inputs_schema = CacheSchema

    path = attr.ib(default='')
    key = attr.ib(default='')
    restore_keys = attr.ib(default='')
    upload_chunk_size = attr.ib(default=0)
    enable_cross_os_archive = attr.ib(default=False)
    fail_on_cache_miss = attr.ib(default=False)
    lookup_only = attr.ib(default=False)
    save_always = attr.ib(default=False)
