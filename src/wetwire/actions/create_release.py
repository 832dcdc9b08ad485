import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class CreateReleaseSchema(wetwire.contract.InputsSchema):
    tag_name = marshmallow.fields.String()
    release_name = marshmallow.fields.String()
    body = marshmallow.fields.String()
    body_path = marshmallow.fields.String()
    draft = wetwire.utils.Boolean()
    prerelease = wetwire.utils.Boolean()
    commitish = marshmallow.fields.String()
    owner = marshmallow.fields.String()
    repo = marshmallow.fields.String()


@attr.s(frozen=True)
class CreateRelease(wetwire.contract.Action):
    action_reference = 'actions/create-release@v1'
    inputs_schema = CreateReleaseSchema

    tag_name = attr.ib(default='')
    release_name = attr.ib(default='')
    body = attr.ib(default='')
    body_path = attr.ib(default='')
    draft = attr.ib(default=False)
    prerelease = attr.ib(default=False)
    commitish = attr.ib(default='')
    owner = attr.ib(default='')
    repo = attr.ib(default='')
