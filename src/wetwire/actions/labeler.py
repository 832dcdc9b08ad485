import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class LabelerSchema(wetwire.contract.InputsSchema):
    repo_token = marshmallow.fields.String(data_key='repo-token')
    configuration_path = marshmallow.fields.String(
        data_key='configuration-path',
    )
    sync_labels = wetwire.utils.Boolean(data_key='sync-labels')
    dot = wetwire.utils.Boolean()
    pr_number = wetwire.utils.Integer(data_key='pr-number')


@attr.s(frozen=True)
class Labeler(wetwire.contract.Action):
    action_reference = 'actions/labeler@v5'
    inputs_schema = LabelerSchema

    repo_token = attr.ib(default='')
    configuration_path = attr.ib(default='')
    sync_labels = attr.ib(default=False)
    dot = attr.ib(default=False)
    pr_number = attr.ib(default=0)
