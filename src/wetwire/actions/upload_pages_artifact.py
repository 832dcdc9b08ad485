import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class UploadPagesArtifactSchema(wetwire.contract.InputsSchema):
    path = marshmallow.fields.String()
    name = marshmallow.fields.String()
    retention_days = wetwire.utils.Integer(data_key='retention-days')


@attr.s(frozen=True)
class UploadPagesArtifact(wetwire.contract.Action):
    action_reference = 'actions/upload-pages-artifact@v3'
    inputs_schema = UploadPagesArtifactSchema

    path = attr.ib(default='')
    name = attr.ib(default='')
    retention_days = attr.ib(default=0)
