import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class CodeQLInitSchema(wetwire.contract.InputsSchema):
    languages = marshmallow.fields.String()
    queries = marshmallow.fields.String()
    config_file = marshmallow.fields.String(data_key='config-file')
    external_repository_token = marshmallow.fields.String(
        data_key='external-repository-token',
    )
    tools = marshmallow.fields.String()
    debug = wetwire.utils.Boolean()
    ram = marshmallow.fields.String()
    threads = marshmallow.fields.String()
    build_mode = marshmallow.fields.String(data_key='build-mode')


@attr.s(frozen=True)
class CodeQLInit(wetwire.contract.Action):
    action_reference = 'github/codeql-action/init@v3'
    inputs_schema = CodeQLInitSchema

    languages = attr.ib(default='')
    queries = attr.ib(default='')
    config_file = attr.ib(default='')
    external_repository_token = attr.ib(default='')
    tools = attr.ib(default='')
    debug = attr.ib(default=False)
    ram = attr.ib(default='')
    threads = attr.ib(default='')
    build_mode = attr.ib(default='')
