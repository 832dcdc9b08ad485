import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class DownloadArtifactSchema(wetwire.contract.InputsSchema):
    name = marshmallow.fields.String()
    path = marshmallow.fields.String()
    pattern = marshmallow.fields.String()
    merge_multiple = wetwire.utils.Boolean(data_key='merge-multiple')
    github_token = marshmallow.fields.String(data_key='github-token')
    repository = marshmallow.fields.String()
    run_id = marshmallow.fields.String(data_key='run-id')


@attr.s(frozen=True)
class DownloadArtifact(wetwire.contract.Action):
    action_reference = 'actions/download-artifact@v4'
    inputs_schema = DownloadArtifactSchema

    name = attr.ib(default='')
    path = attr.ib(default='')
    pattern = attr.ib(default='')
    merge_multiple = attr.ib(default=False)
    github_token = attr.ib(default='')
    repository = attr.ib(default='')
    run_id = attr.ib(default='')
