import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class ToolchainSchema(wetwire.contract.InputsSchema):
    toolchain = marshmallow.fields.String()
    target = marshmallow.fields.String()
    default = wetwire.utils.Boolean()
    override = wetwire.utils.Boolean()
    profile = marshmallow.fields.String()
    components = marshmallow.fields.String()


@attr.s(frozen=True)
class Toolchain(wetwire.contract.Action):
    action_reference = 'actions-rs/toolchain@v1'
    inputs_schema = ToolchainSchema

    toolchain = attr.ib(default='')
    target = attr.ib(default='')
    default = attr.ib(default=False)
    override = attr.ib(default=False)
    profile = attr.ib(default='')
    components = attr.ib(default='')

    @classmethod
    def stable(cls, **kwargs):
        return cls(toolchain='stable', **kwargs)

    @classmethod
    def nightly(cls, **kwargs):
        return cls(toolchain='nightly', **kwargs)

    @classmethod
    def beta(cls, **kwargs):
        return cls(toolchain='beta', **kwargs)
