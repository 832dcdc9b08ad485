import attr
import marshmallow

import wetwire.contract


class PreCommitSchema(wetwire.contract.InputsSchema):
    extra_args = marshmallow.fields.String()
    token = marshmallow.fields.String()


@attr.s(frozen=True)
class PreCommit(wetwire.contract.Action):
    action_reference = 'pre-commit/action@v3.0.1'
    inputs_schema = PreCommitSchema

    extra_args = attr.ib(default='')
    token = attr.ib(default='')
