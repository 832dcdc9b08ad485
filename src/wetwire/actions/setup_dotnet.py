import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class SetupDotnetSchema(wetwire.contract.InputsSchema):
    dotnet_version = marshmallow.fields.String(data_key='dotnet-version')
    dotnet_quality = marshmallow.fields.String(data_key='dotnet-quality')
    global_json_file = marshmallow.fields.String(data_key='global-json-file')
    include_prerelease = wetwire.utils.Boolean(
        data_key='include-prerelease',
    )
    source = marshmallow.fields.String()
    token = marshmallow.fields.String()
    config_file = marshmallow.fields.String(data_key='config-file')
    cache = wetwire.utils.Boolean()
    cache_dependency_path = marshmallow.fields.String(
        data_key='cache-dependency-path',
    )


@attr.s(frozen=True)
class SetupDotnet(wetwire.contract.Action):
    action_reference = 'actions/setup-dotnet@v4'
    inputs_schema = SetupDotnetSchema

    dotnet_version = attr.ib(default='')
    dotnet_quality = attr.ib(default='')
    global_json_file = attr.ib(default='')
    include_prerelease = attr.ib(default=False)
    source = attr.ib(default='')
    token = attr.ib(default='')
    config_file = attr.ib(default='')
    cache = attr.ib(default=False)
    cache_dependency_path = attr.ib(default='')
