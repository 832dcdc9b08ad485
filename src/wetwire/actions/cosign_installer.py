import attr
import marshmallow

import wetwire.contract


class CosignInstallerSchema(wetwire.contract.InputsSchema):
    cosign_release = marshmallow.fields.String(data_key='cosign-release')
    install_dir = marshmallow.fields.String(data_key='install-dir')


@attr.s(frozen=True)
class CosignInstaller(wetwire.contract.Action):
    action_reference = 'sigstore/cosign-installer@v3'
    inputs_schema = CosignInstallerSchema

    cosign_release = attr.ib(default='')
    install_dir = attr.ib(default='')
