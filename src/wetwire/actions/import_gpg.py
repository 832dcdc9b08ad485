import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class ImportGPGSchema(wetwire.contract.InputsSchema):
    gpg_private_key = marshmallow.fields.String()
    passphrase = marshmallow.fields.String()
    git_user_signingkey = wetwire.utils.Boolean()
    git_commit_gpgsign = wetwire.utils.Boolean()
    git_tag_gpgsign = wetwire.utils.Boolean()
    git_push_gpgsign = wetwire.utils.Boolean()
    fingerprint = marshmallow.fields.String()
    trust_level = marshmallow.fields.String()
    git_config_global = wetwire.utils.Boolean()
    workdir = marshmallow.fields.String()


@attr.s(frozen=True)
class ImportGPG(wetwire.contract.Action):
    action_reference = 'crazy-max/ghaction-import-gpg@v6'
    inputs_schema = ImportGPGSchema

    gpg_private_key = attr.ib(default='')
    passphrase = attr.ib(default='')
    git_user_signingkey = attr.ib(default=False)
    git_commit_gpgsign = attr.ib(default=False)
    git_tag_gpgsign = attr.ib(default=False)
    git_push_gpgsign = attr.ib(default=False)
    fingerprint = attr.ib(default='')
    trust_level = attr.ib(default='')
    git_config_global = attr.ib(default=False)
    workdir = attr.ib(default='')
