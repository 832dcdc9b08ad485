import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class HugoSchema(wetwire.contract.InputsSchema):
    hugo_version = marshmallow.fields.String(data_key='hugo-version')
    extended = wetwire.utils.Boolean()
    github_token = marshmallow.fields.String(data_key='github-token')


@attr.s(frozen=True)
class Hugo(wetwire.contract.Action):
    action_reference = 'peaceiris/actions-hugo@v3'
    inputs_schema = HugoSchema

    hugo_version = attr.ib(default='')
    extended = attr.ib(default=False)
    github_token = attr.ib(default='')
