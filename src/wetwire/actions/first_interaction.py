import attr
import marshmallow

import wetwire.contract


class FirstInteractionSchema(wetwire.contract.InputsSchema):
    repo_token = marshmallow.fields.String(data_key='repo-token')
    issue_message = marshmallow.fields.String(data_key='issue-message')
    pr_message = marshmallow.fields.String(data_key='pr-message')


@attr.s(frozen=True)
class FirstInteraction(wetwire.contract.Action):
    action_reference = 'actions/first-interaction@v1'
    inputs_schema = FirstInteractionSchema

    repo_token = attr.ib(default='')
    issue_message = attr.ib(default='')
    pr_message = attr.ib(default='')
