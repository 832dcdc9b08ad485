import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class NcipolloReleaseSchema(wetwire.contract.InputsSchema):
    artifacts = marshmallow.fields.String()
    artifact_content_type = marshmallow.fields.String(
        data_key='artifactContentType',
    )
    artifact_errors_fail_build = wetwire.utils.Boolean(
        data_key='artifactErrorsFailBuild',
    )
    body = marshmallow.fields.String()
    body_file = marshmallow.fields.String(data_key='bodyFile')
    commit = marshmallow.fields.String()
    discussion_category = marshmallow.fields.String(
        data_key='discussionCategory',
    )
    draft = wetwire.utils.Boolean()
    generate_release_notes = wetwire.utils.Boolean(
        data_key='generateReleaseNotes',
    )
    make_latest = marshmallow.fields.String(data_key='makeLatest')
    name = marshmallow.fields.String()
    omit_body = wetwire.utils.Boolean(data_key='omitBody')
    omit_body_during_update = wetwire.utils.Boolean(
        data_key='omitBodyDuringUpdate',
    )
    omit_draft_during_update = wetwire.utils.Boolean(
        data_key='omitDraftDuringUpdate',
    )
    omit_name = wetwire.utils.Boolean(data_key='omitName')
    omit_name_during_update = wetwire.utils.Boolean(
        data_key='omitNameDuringUpdate',
    )
    omit_prerelease_during_update = wetwire.utils.Boolean(
        data_key='omitPrereleaseDuringUpdate',
    )
    owner = marshmallow.fields.String()
    prerelease = wetwire.utils.Boolean()
    remove_artifacts = wetwire.utils.Boolean(data_key='removeArtifacts')
    replaces_artifacts = wetwire.utils.Boolean(
        data_key='replacesArtifacts',
    )
    repo = marshmallow.fields.String()
    skip_if_release_exists = wetwire.utils.Boolean(
        data_key='skipIfReleaseExists',
    )
    tag = marshmallow.fields.String()
    token = marshmallow.fields.String()
    update_only_unreleased = wetwire.utils.Boolean(
        data_key='updateOnlyUnreleased',
    )
    allow_updates = wetwire.utils.Boolean(data_key='allowUpdates')


@attr.s(frozen=True)
class NcipolloRelease(wetwire.contract.Action):
    action_reference = 'ncipollo/release-action@v1'
    inputs_schema = NcipolloReleaseSchema

    artifacts = attr.ib(default='')
    artifact_content_type = attr.ib(default='')
    artifact_errors_fail_build = attr.ib(default=False)
    body = attr.ib(default='')
    body_file = attr.ib(default='')
    commit = attr.ib(default='')
    discussion_category = attr.ib(default='')
    draft = attr.ib(default=False)
    generate_release_notes = attr.ib(default=False)
    make_latest = attr.ib(default='')
    name = attr.ib(default='')
    omit_body = attr.ib(default=False)
    omit_body_during_update = attr.ib(default=False)
    omit_draft_during_update = attr.ib(default=False)
    omit_name = attr.ib(default=False)
    omit_name_during_update = attr.ib(default=False)
    omit_prerelease_during_update = attr.ib(default=False)
    owner = attr.ib(default='')
    prerelease = attr.ib(default=False)
    remove_artifacts = attr.ib(default=False)
    replaces_artifacts = attr.ib(default=False)
    repo = attr.ib(default='')
    skip_if_release_exists = attr.ib(default=False)
    tag = attr.ib(default='')
    token = attr.ib(default='')
    update_only_unreleased = attr.ib(default=False)
    allow_updates = attr.ib(default=False)
