import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class SetupPythonSchema(wetwire.contract.InputsSchema):
    python_version = marshmallow.fields.String(data_key='python-version')
    python_version_file = marshmallow.fields.String(
        data_key='python-version-file',
    )
    cache = marshmallow.fields.String()
    architecture = marshmallow.fields.String()
    check_latest = wetwire.utils.Boolean(data_key='check-latest')
    token = marshmallow.fields.String()
    cache_dependency_path = marshmallow.fields.String(
        data_key='cache-dependency-path',
    )
    update_environment = wetwire.utils.Boolean(
        data_key='update-environment',
    )
    allow_prereleases = wetwire.utils.Boolean(
        data_key='allow-prereleases',
    )


@attr.s(frozen=True)
class SetupPython(wetwire.contract.Action):
    action_reference = 'actions/setup-python@v5'
    inputs_schema = SetupPythonSchema

    python_version = attr.ib(default='')
    python_version_file = attr.ib(default='')
    cache = attr.ib(default='')
    architecture = attr.ib(default='')
    check_latest = attr.ib(default=False)
    token = attr.ib(default='')
    cache_dependency_path = attr.ib(default='')
    update_environment = attr.ib(default=False)
    allow_prereleases = attr.ib(default=False)
