import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class GithubScriptSchema(wetwire.contract.InputsSchema):
    script = marshmallow.fields.String()
    github_token = marshmallow.fields.String(data_key='github-token')
    debug = wetwire.utils.Boolean()
    user_agent = marshmallow.fields.String(data_key='user-agent')
    previews = marshmallow.fields.String()
    result_encoding = marshmallow.fields.String(data_key='result-encoding')
    retries = wetwire.utils.Integer()
    retry_exempt_status_codes = marshmallow.fields.String(
        data_key='retry-exempt-status-codes',
    )


@attr.s(frozen=True)
class GithubScript(wetwire.contract.Action):
    action_reference = 'actions/github-script@v7'
    inputs_schema = GithubScriptSchema

    script = attr.ib(default='')
    github_token = attr.ib(default='')
    debug = attr.ib(default=False)
    user_agent = attr.ib(default='')
    previews = attr.ib(default='')
    result_encoding = attr.ib(default='')
    retries = attr.ib(default=0)
    retry_exempt_status_codes = attr.ib(default='')
