import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class GitHubPagesDeploySchema(wetwire.contract.InputsSchema):
    ssh_key = marshmallow.fields.String(data_key='ssh-key')
    token = marshmallow.fields.String()
    branch = marshmallow.fields.String()
    folder = marshmallow.fields.String()
    target_folder = marshmallow.fields.String(data_key='target-folder')
    commit_message = marshmallow.fields.String(data_key='commit-message')
    clean = wetwire.utils.Boolean()
    clean_exclude = marshmallow.fields.String(data_key='clean-exclude')
    dry_run = wetwire.utils.Boolean(data_key='dry-run')
    force = wetwire.utils.Boolean()
    git_config_name = marshmallow.fields.String(data_key='git-config-name')
    git_config_email = marshmallow.fields.String(data_key='git-config-email')
    repository_name = marshmallow.fields.String(data_key='repository-name')
    tag = marshmallow.fields.String()
    single_commit = wetwire.utils.Boolean(data_key='single-commit')
    silent = wetwire.utils.Boolean()
    attempt_limit = wetwire.utils.Integer(data_key='attempt-limit')


@attr.s(frozen=True)
class GitHubPagesDeploy(wetwire.contract.Action):
    action_reference = 'JamesIves/github-pages-deploy-action@v4'
    inputs_schema = GitHubPagesDeploySchema

    ssh_key = attr.ib(default='')
    token = attr.ib(default='')
    branch = attr.ib(default='')
    folder = attr.ib(default='')
    target_folder = attr.ib(default='')
    commit_message = attr.ib(default='')
    clean = attr.ib(default=False)
    clean_exclude = attr.ib(default='')
    dry_run = attr.ib(default=False)
    force = attr.ib(default=False)
    git_config_name = attr.ib(default='')
    git_config_email = attr.ib(default='')
    repository_name = attr.ib(default='')
    tag = attr.ib(default='')
    single_commit = attr.ib(default=False)
    silent = attr.ib(default=False)
    attempt_limit = attr.ib(default=0)
