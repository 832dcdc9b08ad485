import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class UploadSarifSchema(wetwire.contract.InputsSchema):
    sarif_file = marshmallow.fields.String()
    checkout_path = marshmallow.fields.String()
    ref = marshmallow.fields.String()
    sha = marshmallow.fields.String()
    category = marshmallow.fields.String()
    token = marshmallow.fields.String()
    wait_for_processing = wetwire.utils.Boolean(
        data_key='wait-for-processing',
    )


@attr.s(frozen=True)
class UploadSarif(wetwire.contract.Action):
    action_reference = 'github/codeql-action/upload-sarif@v3'
    inputs_schema = UploadSarifSchema

    sarif_file = attr.ib(default='')
    checkout_path = attr.ib(default='')
    ref = attr.ib(default='')
    sha = attr.ib(default='')
    category = attr.ib(default='')
    token = attr.ib(default='')
    wait_for_processing = attr.ib(default=False)
