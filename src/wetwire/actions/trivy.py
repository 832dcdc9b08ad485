import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class TrivySchema(wetwire.contract.InputsSchema):
    image_ref = marshmallow.fields.String(data_key='image-ref')
    scan_type = marshmallow.fields.String(data_key='scan-type')
    format = marshmallow.fields.String()
    severity = marshmallow.fields.String()
    exit_code = wetwire.utils.Integer(data_key='exit-code')
    ignore_unfixed = wetwire.utils.Boolean(data_key='ignore-unfixed')
    vuln_type = marshmallow.fields.String(data_key='vuln-type')
    scanners = marshmallow.fields.String()
    template = marshmallow.fields.String()
    output = marshmallow.fields.String()


@attr.s(frozen=True)
class Trivy(wetwire.contract.Action):
    action_reference = 'aquasecurity/trivy-action@0.28.0'
    inputs_schema = TrivySchema

    image_ref = attr.ib(default='')
    scan_type = attr.ib(default='')
    format = attr.ib(default='')
    severity = attr.ib(default='')
    exit_code = attr.ib(default=0)
    ignore_unfixed = attr.ib(default=False)
    vuln_type = attr.ib(default='')
    scanners = attr.ib(default='')
    template = attr.ib(default='')
    output = attr.ib(default='')
