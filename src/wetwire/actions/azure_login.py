import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class AzureLoginSchema(wetwire.contract.InputsSchema):
    creds = marshmallow.fields.String()
    client_id = marshmallow.fields.String(data_key='client-id')
    tenant_id = marshmallow.fields.String(data_key='tenant-id')
    subscription_id = marshmallow.fields.String(data_key='subscription-id')
    enable_az_ps_session = wetwire.utils.Boolean(
        data_key='enable-AzPSSession',
    )
    environment = marshmallow.fields.String()
    allow_no_subscriptions = wetwire.utils.Boolean(
        data_key='allow-no-subscriptions',
    )
    audience = marshmallow.fields.String()
    auth_type = marshmallow.fields.String(data_key='auth-type')


@attr.s(frozen=True)
class AzureLogin(wetwire.contract.Action):
    action_reference = 'azure/login@v2'
    inputs_schema = AzureLoginSchema

    creds = attr.ib(default='')
    client_id = attr.ib(default='')
    tenant_id = attr.ib(default='')
    subscription_id = attr.ib(default='')
    enable_az_ps_session = attr.ib(default=False)
    environment = attr.ib(default='')
    allow_no_subscriptions = attr.ib(default=False)
    audience = attr.ib(default='')
    auth_type = attr.ib(default='')
