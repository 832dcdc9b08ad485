import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class CodecovSchema(wetwire.contract.InputsSchema):
    token = marshmallow.fields.String()
    files = marshmallow.fields.String()
    directory = marshmallow.fields.String()
    flags = marshmallow.fields.String()
    name = marshmallow.fields.String()
    fail_ci_if_error = wetwire.utils.Boolean()
    verbose = wetwire.utils.Boolean()
    working_directory = marshmallow.fields.String(data_key='working-directory')
    env_vars = marshmallow.fields.String()
    os = marshmallow.fields.String()
    slug = marshmallow.fields.String()
    version = marshmallow.fields.String()
    dry_run = wetwire.utils.Boolean()
    use_oidc = wetwire.utils.Boolean()
    codecov_yml_path = marshmallow.fields.String()
    plugin = marshmallow.fields.String()


@attr.s(frozen=True)
class Codecov(wetwire.contract.Action):
    action_reference = 'codecov/codecov-action@v5'
    inputs_schema = CodecovSchema

    token = attr.ib(default='')
    files = attr.ib(default='')
    directory = attr.ib(default='')
    flags = attr.ib(default='')
    name = attr.ib(default='')
    fail_ci_if_error = attr.ib(default=False)
    verbose = attr.ib(default=False)
    working_directory = attr.ib(default='')
    env_vars = attr.ib(default='')
    os = attr.ib(default='')
    slug = attr.ib(default='')
    version = attr.ib(default='')
    dry_run = attr.ib(default=False)
    use_oidc = attr.ib(default=False)
    codecov_yml_path = attr.ib(default='')
    plugin = attr.ib(default='')
