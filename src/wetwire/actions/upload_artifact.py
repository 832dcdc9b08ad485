import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class UploadArtifactSchema(wetwire.contract.InputsSchema):
    name = marshmallow.fields.String()
    path = marshmallow.fields.String()
    if_no_files_found = marshmallow.fields.String(data_key='if-no-files-found')
    retention_days = wetwire.utils.Integer(data_key='retention-days')
    compression_level = wetwire.utils.Integer(
        data_key='compression-level',
    )
    overwrite = wetwire.utils.Boolean()
    include_hidden_files = wetwire.utils.Boolean(
        data_key='include-hidden-files',
    )


@attr.s(frozen=True)
class UploadArtifact(wetwire.contract.Action):
    action_reference = 'actions/upload-artifact@v4'
    inputs_schema = UploadArtifactSchema

    name = attr.ib(default='')
    path = attr.ib(default='')
    if_no_files_found = attr.ib(default='')
    retention_days = attr.ib(default=0)
    compression_level = attr.ib(default=0)
    overwrite = attr.ib(default=False)
    include_hidden_files = attr.ib(default=False)
