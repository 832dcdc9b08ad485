import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class CreatePullRequestSchema(wetwire.contract.InputsSchema):
    token = marshmallow.fields.String()
    path = marshmallow.fields.String()
    add_paths = marshmallow.fields.String(data_key='add-paths')
    commit_message = marshmallow.fields.String(data_key='commit-message')
    committer = marshmallow.fields.String()
    author = marshmallow.fields.String()
    signoff = wetwire.utils.Boolean()
    branch = marshmallow.fields.String()
    branch_suffix = marshmallow.fields.String(data_key='branch-suffix')
    delete_branch = wetwire.utils.Boolean(data_key='delete-branch')
    title = marshmallow.fields.String()
    body = marshmallow.fields.String()
    body_path = marshmallow.fields.String(data_key='body-path')
    labels = marshmallow.fields.String()
    assignees = marshmallow.fields.String()
    reviewers = marshmallow.fields.String()
    team_reviewers = marshmallow.fields.String(data_key='team-reviewers')
    milestone = wetwire.utils.Integer()
    draft = wetwire.utils.Boolean()


@attr.s(frozen=True)
class CreatePullRequest(wetwire.contract.Action):
    action_reference = 'peter-evans/create-pull-request@v6'
    inputs_schema = CreatePullRequestSchema

    token = attr.ib(default='')
    path = attr.ib(default='')
    add_paths = attr.ib(default='')
    commit_message = attr.ib(default='')
    committer = attr.ib(default='')
    author = attr.ib(default='')
    signoff = attr.ib(default=False)
    branch = attr.ib(default='')
    branch_suffix = attr.ib(default='')
    delete_branch = attr.ib(default=False)
    title = attr.ib(default='')
    body = attr.ib(default='')
    body_path = attr.ib(default='')
    labels = attr.ib(default='')
    assignees = attr.ib(default='')
    reviewers = attr.ib(default='')
    team_reviewers = attr.ib(default='')
    milestone = attr.ib(default=0)
    draft = attr.ib(default=False)
