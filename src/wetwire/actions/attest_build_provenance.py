import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class AttestBuildProvenanceSchema(wetwire.contract.InputsSchema):
    subject_path = marshmallow.fields.String(data_key='subject-path')
    subject_digest = marshmallow.fields.String(data_key='subject-digest')
    subject_name = marshmallow.fields.String(data_key='subject-name')
    subject_checksums = marshmallow.fields.String(data_key='subject-checksums')
    push_to_registry = wetwire.utils.Boolean(data_key='push-to-registry')
    create_storage_record = wetwire.utils.Boolean(
        data_key='create-storage-record',
    )
    show_summary = wetwire.utils.Boolean(data_key='show-summary')
    github_token = marshmallow.fields.String(data_key='github-token')


@attr.s(frozen=True)
class AttestBuildProvenance(wetwire.contract.Action):
    action_reference = 'actions/attest-build-provenance@v1'
    inputs_schema = AttestBuildProvenanceSchema

    subject_path = attr.ib(default='')
    subject_digest = attr.ib(default='')
    subject_name = attr.ib(default='')
    subject_checksums = attr.ib(default='')
    push_to_registry = attr.ib(default=False)
    create_storage_record = attr.ib(default=False)
    show_summary = attr.ib(default=False)
    github_token = attr.ib(default='')
