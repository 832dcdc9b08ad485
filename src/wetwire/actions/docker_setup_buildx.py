import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class DockerSetupBuildxSchema(wetwire.contract.InputsSchema):
    version = marshmallow.fields.String()
    driver = marshmallow.fields.String()
    driver_opts = marshmallow.fields.String(data_key='driver-opts')
    buildkitd_flags = marshmallow.fields.String(data_key='buildkitd-flags')
    install = wetwire.utils.Boolean()
    use = wetwire.utils.Boolean()
    endpoint = marshmallow.fields.String()
    platforms = marshmallow.fields.String()
    config = marshmallow.fields.String()
    config_inline = marshmallow.fields.String(data_key='config-inline')
    append = marshmallow.fields.String()
    cleanup = wetwire.utils.Boolean()


@attr.s(frozen=True)
class DockerSetupBuildx(wetwire.contract.Action):
    action_reference = 'docker/setup-buildx-action@v3'
    inputs_schema = DockerSetupBuildxSchema

    version = attr.ib(default='')
    driver = attr.ib(default='')
    driver_opts = attr.ib(default='')
    buildkitd_flags = attr.ib(default='')
    install = attr.ib(default=False)
    use = attr.ib(default=False)
    endpoint = attr.ib(default='')
    platforms = attr.ib(default='')
    config = attr.ib(default='')
    config_inline = attr.ib(default='')
    append = attr.ib(default='')
    cleanup = attr.ib(default=False)
