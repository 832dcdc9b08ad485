import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class SlackSchema(wetwire.contract.InputsSchema):
    channel_id = marshmallow.fields.String(data_key='channel-id')
    slack_message = marshmallow.fields.String(data_key='slack-message')
    payload = marshmallow.fields.String()
    payload_delimiter = marshmallow.fields.String(data_key='payload-delimiter')
    payload_file_path = marshmallow.fields.String(data_key='payload-file-path')
    payload_file_path_parsed = wetwire.utils.Boolean(
        data_key='payload-file-path-parsed',
    )
    update_ts = marshmallow.fields.String(data_key='update-ts')


@attr.s(frozen=True)
class Slack(wetwire.contract.Action):
    action_reference = 'slackapi/slack-github-action@v1'
    inputs_schema = SlackSchema

    channel_id = attr.ib(default='')
    slack_message = attr.ib(default='')
    payload = attr.ib(default='')
    payload_delimiter = attr.ib(default='')
    payload_file_path = attr.ib(default='')
    payload_file_path_parsed = attr.ib(default=False)
    update_ts = attr.ib(default='')
