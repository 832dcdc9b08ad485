import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class GitHubTagActionSchema(wetwire.contract.InputsSchema):
    github_token = marshmallow.fields.String()
    default_bump = marshmallow.fields.String()
    tag_prefix = marshmallow.fields.String()
    dry_run = wetwire.utils.Boolean()
    custom_tag = marshmallow.fields.String()
    initial_version = marshmallow.fields.String()
    release_branches = marshmallow.fields.String()
    prerelease_branches = marshmallow.fields.String()


@attr.s(frozen=True)
class GitHubTagAction(wetwire.contract.Action):
    action_reference = 'anothrNick/github-tag-action@v1'
    inputs_schema = GitHubTagActionSchema

    github_token = attr.ib(default='')
    default_bump = attr.ib(default='')
    tag_prefix = attr.ib(default='')
    dry_run = attr.ib(default=False)
    custom_tag = attr.ib(default='')
    initial_version = attr.ib(default='')
    release_branches = attr.ib(default='')
    prerelease_branches = attr.ib(default='')
