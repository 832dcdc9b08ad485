import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class SetupJavaSchema(wetwire.contract.InputsSchema):
    java_version = marshmallow.fields.String(data_key='java-version')
    distribution = marshmallow.fields.String()
    java_version_file = marshmallow.fields.String(data_key='java-version-file')
    java_package = marshmallow.fields.String(data_key='java-package')
    architecture = marshmallow.fields.String()
    jdk_file = marshmallow.fields.String(data_key='jdk-file')
    check_latest = wetwire.utils.Boolean(data_key='check-latest')
    server_id = marshmallow.fields.String(data_key='server-id')
    server_username = marshmallow.fields.String(data_key='server-username')
    server_password = marshmallow.fields.String(data_key='server-password')
    settings_path = marshmallow.fields.String(data_key='settings-path')
    overwrite_settings = wetwire.utils.Boolean(
        data_key='overwrite-settings',
    )
    gpg_private_key = marshmallow.fields.String(data_key='gpg-private-key')
    gpg_passphrase = marshmallow.fields.String(data_key='gpg-passphrase')
    cache = marshmallow.fields.String()
    cache_dependency_path = marshmallow.fields.String(
        data_key='cache-dependency-path',
    )
    token = marshmallow.fields.String()
    mvn_toolchain_id = marshmallow.fields.String(data_key='mvn-toolchain-id')
    mvn_toolchain_vendor = marshmallow.fields.String(
        data_key='mvn-toolchain-vendor',
    )


@attr.s(frozen=True)
class SetupJava(wetwire.contract.Action):
    action_reference = 'actions/setup-java@v4'
    inputs_schema = SetupJavaSchema

    java_version = attr.ib(default='')
    distribution = attr.ib(default='')
    java_version_file = attr.ib(default='')
    java_package = attr.ib(default='')
    architecture = attr.ib(default='')
    jdk_file = attr.ib(default='')
    check_latest = attr.ib(default=False)
    server_id = attr.ib(default='')
    server_username = attr.ib(default='')
    server_password = attr.ib(default='')
    settings_path = attr.ib(default='')
    overwrite_settings = attr.ib(default=False)
    gpg_private_key = attr.ib(default='')
    gpg_passphrase = attr.ib(default='')
    cache = attr.ib(default='')
    cache_dependency_path = attr.ib(default='')
    token = attr.ib(default='')
    mvn_toolchain_id = attr.ib(default='')
    mvn_toolchain_vendor = attr.ib(default='')
