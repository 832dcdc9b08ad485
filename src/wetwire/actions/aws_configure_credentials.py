import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class AWSConfigureCredentialsSchema(wetwire.contract.InputsSchema):
    aws_region = marshmallow.fields.String(data_key='aws-region')
    role_to_assume = marshmallow.fields.String(data_key='role-to-assume')
    aws_access_key_id = marshmallow.fields.String(data_key='aws-access-key-id')
    aws_secret_access_key = marshmallow.fields.String(
        data_key='aws-secret-access-key',
    )
    aws_session_token = marshmallow.fields.String(data_key='aws-session-token')
    web_identity_token_file = marshmallow.fields.String(
        data_key='web-identity-token-file',
    )
    role_chaining = wetwire.utils.Boolean(data_key='role-chaining')
    audience = marshmallow.fields.String()
    http_proxy = marshmallow.fields.String(data_key='http-proxy')
    role_duration_seconds = wetwire.utils.Integer(
        data_key='role-duration-seconds',
    )
    role_external_id = marshmallow.fields.String(data_key='role-external-id')
    role_session_name = marshmallow.fields.String(data_key='role-session-name')
    role_skip_session_tagging = wetwire.utils.Boolean(
        data_key='role-skip-session-tagging',
    )
    inline_session_policy = marshmallow.fields.String(
        data_key='inline-session-policy',
    )
    managed_session_policies = marshmallow.fields.String(
        data_key='managed-session-policies',
    )
    output_credentials = wetwire.utils.Boolean(
        data_key='output-credentials',
    )
    mask_aws_account_id = wetwire.utils.Boolean(
        data_key='mask-aws-account-id',
    )
    unset_current_credentials = wetwire.utils.Boolean(
        data_key='unset-current-credentials',
    )
    disable_retry = wetwire.utils.Boolean(data_key='disable-retry')
    retry_max_attempts = wetwire.utils.Integer(
        data_key='retry-max-attempts',
    )
    special_characters_workaround = wetwire.utils.Boolean(
        data_key='special-characters-workaround',
    )


@attr.s(frozen=True)
class AWSConfigureCredentials(wetwire.contract.Action):
    action_reference = 'aws-actions/configure-aws-credentials@v4'
    inputs_schema = AWSConfigureCredentialsSchema

    aws_region = attr.ib(default='')
    role_to_assume = attr.ib(default='')
    aws_access_key_id = attr.ib(default='')
    aws_secret_access_key = attr.ib(default='')
    aws_session_token = attr.ib(default='')
    web_identity_token_file = attr.ib(default='')
    role_chaining = attr.ib(default=False)
    audience = attr.ib(default='')
    http_proxy = attr.ib(default='')
    role_duration_seconds = attr.ib(default=0)
    role_external_id = attr.ib(default='')
    role_session_name = attr.ib(default='')
    role_skip_session_tagging = attr.ib(default=False)
    inline_session_policy = attr.ib(default='')
    managed_session_policies = attr.ib(default='')
    output_credentials = attr.ib(default=False)
    mask_aws_account_id = attr.ib(default=False)
    unset_current_credentials = attr.ib(default=False)
    disable_retry = attr.ib(default=False)
    retry_max_attempts = attr.ib(default=0)
    special_characters_workaround = attr.ib(default=False)
