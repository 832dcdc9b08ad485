import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class SetupNodeSchema(wetwire.contract.InputsSchema):
    node_version = marshmallow.fields.String(data_key='node-version')
    node_version_file = marshmallow.fields.String(data_key='node-version-file')
    architecture = marshmallow.fields.String()
    check_latest = wetwire.utils.Boolean(data_key='check-latest')
    registry_url = marshmallow.fields.String(data_key='registry-url')
    scope = marshmallow.fields.String()
    token = marshmallow.fields.String()
    cache = marshmallow.fields.String()
    cache_dependency_path = marshmallow.fields.String(
        data_key='cache-dependency-path',
    )
    always_auth = wetwire.utils.Boolean(data_key='always-auth')


@attr.s(frozen=True)
class SetupNode(wetwire.contract.Action):
    action_reference = 'actions/setup-node@v4'
    inputs_schema = SetupNodeSchema

    node_version = attr.ib(default='')
    node_version_file = attr.ib(default='')
    architecture = attr.ib(default='')
    check_latest = attr.ib(default=False)
    registry_url = attr.ib(default='')
    scope = attr.ib(default='')
    token = attr.ib(default='')
    cache = attr.ib(default='')
    cache_dependency_path = attr.ib(default='')
    always_auth = attr.ib(default=False)
