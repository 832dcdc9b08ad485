import attr
import marshmallow

import wetwire.contract


class UploadReleaseAssetSchema(wetwire.contract.InputsSchema):
    upload_url = marshmallow.fields.String()
    asset_path = marshmallow.fields.String()
    asset_name = marshmallow.fields.String()
    asset_content_type = marshmallow.fields.String()


@attr.s(frozen=True)
class UploadReleaseAsset(wetwire.contract.Action):
    action_reference = 'actions/upload-release-asset@v1'
    inputs_schema = UploadReleaseAssetSchema

    upload_url = attr.ib(default='')
    asset_path = attr.ib(default='')
    asset_name = attr.ib(default='')
    asset_content_type = attr.ib(default='')
