import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class CodeQLAnalyzeSchema(wetwire.contract.InputsSchema):
    category = marshmallow.fields.String()
    output = marshmallow.fields.String()
    upload = wetwire.utils.Boolean()
    upload_database = wetwire.utils.Boolean(data_key='upload-database')
    checkout_path = marshmallow.fields.String(data_key='checkout-path')
    ram = marshmallow.fields.String()
    threads = marshmallow.fields.String()


@attr.s(frozen=True)
class CodeQLAnalyze(wetwire.contract.Action):
    action_reference = 'github/codeql-action/analyze@v3'
    inputs_schema = CodeQLAnalyzeSchema

    category = attr.ib(default='')
    output = attr.ib(default='')
    upload = attr.ib(default=False)
    upload_database = attr.ib(default=False)
    checkout_path = attr.ib(default='')
    ram = attr.ib(default='')
    threads = attr.ib(default='')
