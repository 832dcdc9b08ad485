import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class AWSECRLoginSchema(wetwire.contract.InputsSchema):
    registries = marshmallow.fields.String()
    registry_type = marshmallow.fields.String(data_key='registry-type')
    mask_password = wetwire.utils.Boolean(data_key='mask-password')
    skip_logout = wetwire.utils.Boolean(data_key='skip-logout')
    http_proxy = marshmallow.fields.String(data_key='http-proxy')


@attr.s(frozen=True)
class AWSECRLogin(wetwire.contract.Action):
    action_reference = 'aws-actions/amazon-ecr-login@v2'
    inputs_schema = AWSECRLoginSchema

    registries = attr.ib(default='')
    registry_type = attr.ib(default='')
    mask_password = attr.ib(default=False)
    skip_logout = attr.ib(default=False)
    http_proxy = attr.ib(default='')
