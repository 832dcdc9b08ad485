import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class SetupGoSchema(wetwire.contract.InputsSchema):
    go_version = marshmallow.fields.String(data_key='go-version')
    go_version_file = marshmallow.fields.String(data_key='go-version-file')
    check_latest = wetwire.utils.Boolean(data_key='check-latest')
    token = marshmallow.fields.String()
    cache = wetwire.utils.Boolean(
        allow_none=True,
        metadata={'explicit': True},
    )
    cache_dependency_path = marshmallow.fields.String(
        data_key='cache-dependency-path',
    )
    architecture = marshmallow.fields.String()


@attr.s(frozen=True)
class SetupGo(wetwire.contract.Action):
    action_reference = 'actions/setup-go@v5'
    inputs_schema = SetupGoSchema

    go_version = attr.ib(default='')
    go_version_file = attr.ib(default='')
    check_latest = attr.ib(default=False)
    token = attr.ib(default='')
    cache = attr.ib(default=None)
    cache_dependency_path = attr.ib(default='')
    architecture = attr.ib(default='')
