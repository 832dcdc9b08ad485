import attr
import marshmallow

import wetwire.contract


class ConfigurePagesSchema(wetwire.contract.InputsSchema):
    static_site_generator = marshmallow.fields.String()
    generator_config_file = marshmallow.fields.String()
    token = marshmallow.fields.String()


@attr.s(frozen=True)
class ConfigurePages(wetwire.contract.Action):
    action_reference = 'actions/configure-pages@v5'
    inputs_schema = ConfigurePagesSchema

    static_site_generator = attr.ib(default='')
    generator_config_file = attr.ib(default='')
    token = attr.ib(default='')
