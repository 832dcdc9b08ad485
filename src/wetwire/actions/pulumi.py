import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class PulumiSchema(wetwire.contract.InputsSchema):
    command = marshmallow.fields.String()
    stack_name = marshmallow.fields.String(data_key='stack-name')
    work_dir = marshmallow.fields.String(data_key='work-dir')
    cloud_url = marshmallow.fields.String(data_key='cloud-url')
    config_map = marshmallow.fields.String(data_key='config-map')
    secrets_provider = marshmallow.fields.String(data_key='secrets-provider')
    color = marshmallow.fields.String()
    diff = wetwire.utils.Boolean()
    comment_on_pr = wetwire.utils.Boolean(data_key='comment-on-pr')
    edit_pr_comment = wetwire.utils.Boolean(data_key='edit-pr-comment')


@attr.s(frozen=True)
class Pulumi(wetwire.contract.Action):
    action_reference = 'pulumi/actions@v6'
    inputs_schema = PulumiSchema

    command = attr.ib(default='')
    stack_name = attr.ib(default='')
    work_dir = attr.ib(default='')
    cloud_url = attr.ib(default='')
    config_map = attr.ib(default='')
    secrets_provider = attr.ib(default='')
    color = attr.ib(default='')
    diff = attr.ib(default=False)
    comment_on_pr = attr.ib(default=False)
    edit_pr_comment = attr.ib(default=False)
