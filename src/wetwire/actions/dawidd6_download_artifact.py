import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class DownloadArtifactSchema(wetwire.contract.InputsSchema):
    github_token = marshmallow.fields.String()
    workflow = marshmallow.fields.String()
    name = marshmallow.fields.String()
    path = marshmallow.fields.String()
    branch = marshmallow.fields.String()
    repo = marshmallow.fields.String()
    run_id = marshmallow.fields.String()
    run_number = marshmallow.fields.String()
    if_no_artifact_found = marshmallow.fields.String()
    allow_forks = wetwire.utils.Boolean()
    check_artifacts = wetwire.utils.Boolean()
    search_artifacts = wetwire.utils.Boolean()


@attr.s(frozen=True)
class DownloadArtifact(wetwire.contract.Action):
    action_reference = 'dawidd6/action-download-artifact@v6'
    inputs_schema = DownloadArtifactSchema

    github_token = attr.ib(default='')
    workflow = attr.ib(default='')
    name = attr.ib(default='')
    path = attr.ib(default='')
    branch = attr.ib(default='')
    repo = attr.ib(default='')
    run_id = attr.ib(default='')
    run_number = attr.ib(default='')
    if_no_artifact_found = attr.ib(default='')
    allow_forks = attr.ib(default=False)
    check_artifacts = attr.ib(default=False)
    search_artifacts = attr.ib(default=False)
