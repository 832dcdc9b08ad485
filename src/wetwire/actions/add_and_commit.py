import attr
import marshmallow

import wetwire.contract


class AddAndCommitSchema(wetwire.contract.InputsSchema):
    add = marshmallow.fields.String()
    author_name = marshmallow.fields.String()
    author_email = marshmallow.fields.String()
    message = marshmallow.fields.String()
    push = marshmallow.fields.String()
    default_author = marshmallow.fields.String()


@attr.s(frozen=True)
class AddAndCommit(wetwire.contract.Action):
    action_reference = 'EndBug/add-and-commit@v9'
    inputs_schema = AddAndCommitSchema

    add = attr.ib(default='')
    author_name = attr.ib(default='')
    author_email = attr.ib(default='')
    message = attr.ib(default='')
    push = attr.ib(default='')
    default_author = attr.ib(default='')
