import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class CreateGithubAppTokenSchema(wetwire.contract.InputsSchema):
    app_id = marshmallow.fields.String(data_key='app-id')
    private_key = marshmallow.fields.String(data_key='private-key')
    owner = marshmallow.fields.String()
    repositories = marshmallow.fields.String()
    skip_token_revoke = wetwire.utils.Boolean(
        data_key='skip-token-revoke',
    )
    github_api_url = marshmallow.fields.String(data_key='github-api-url')
    permission_actions = marshmallow.fields.String(
        data_key='permission-actions',
    )
    permission_administration = marshmallow.fields.String(
        data_key='permission-administration',
    )
    permission_checks = marshmallow.fields.String(data_key='permission-checks')
    permission_codespaces = marshmallow.fields.String(
        data_key='permission-codespaces',
    )
    permission_contents = marshmallow.fields.String(
        data_key='permission-contents',
    )
    permission_dependabot_secrets = marshmallow.fields.String(
        data_key='permission-dependabot-secrets',
    )
    permission_deployments = marshmallow.fields.String(
        data_key='permission-deployments',
    )
    permission_environments = marshmallow.fields.String(
        data_key='permission-environments',
    )
    permission_issues = marshmallow.fields.String(data_key='permission-issues')
    permission_metadata = marshmallow.fields.String(
        data_key='permission-metadata',
    )
    permission_packages = marshmallow.fields.String(
        data_key='permission-packages',
    )
    permission_pages = marshmallow.fields.String(data_key='permission-pages')
    permission_pull_requests = marshmallow.fields.String(
        data_key='permission-pull-requests',
    )
    permission_repository_hooks = marshmallow.fields.String(
        data_key='permission-repository-hooks',
    )
    permission_repository_projects = marshmallow.fields.String(
        data_key='permission-repository-projects',
    )
    permission_secret_scanning_alerts = marshmallow.fields.String(
        data_key='permission-secret-scanning-alerts',
    )
    permission_secrets = marshmallow.fields.String(
        data_key='permission-secrets',
    )
    permission_security_events = marshmallow.fields.String(
        data_key='permission-security-events',
    )
    permission_statuses = marshmallow.fields.String(
        data_key='permission-statuses',
    )
    permission_vulnerability_alerts = marshmallow.fields.String(
        data_key='permission-vulnerability-alerts',
    )
    permission_workflows = marshmallow.fields.String(
        data_key='permission-workflows',
    )
    permission_members = marshmallow.fields.String(
        data_key='permission-members',
    )
    permission_organization_administration = marshmallow.fields.String(
        data_key='permission-organization-administration',
    )
    permission_organization_events = marshmallow.fields.String(
        data_key='permission-organization-events',
    )
    permission_organization_hooks = marshmallow.fields.String(
        data_key='permission-organization-hooks',
    )
    permission_organization_packages = marshmallow.fields.String(
        data_key='permission-organization-packages',
    )
    permission_organization_plan = marshmallow.fields.String(
        data_key='permission-organization-plan',
    )
    permission_organization_projects = marshmallow.fields.String(
        data_key='permission-organization-projects',
    )
    permission_organization_secrets = marshmallow.fields.String(
        data_key='permission-organization-secrets',
    )
    permission_organization_self_hosted_runners = marshmallow.fields.String(
        data_key='permission-organization-self-hosted-runners',
    )
    permission_organization_user_blocking = marshmallow.fields.String(
        data_key='permission-organization-user-blocking',
    )
    permission_team_discussions = marshmallow.fields.String(
        data_key='permission-team-discussions',
    )
    permission_email_addresses = marshmallow.fields.String(
        data_key='permission-email-addresses',
    )
    permission_followers = marshmallow.fields.String(
        data_key='permission-followers',
    )
    permission_git_ssh_keys = marshmallow.fields.String(
        data_key='permission-git-ssh-keys',
    )
    permission_gpg_keys = marshmallow.fields.String(
        data_key='permission-gpg-keys',
    )
    permission_interaction_limits = marshmallow.fields.String(
        data_key='permission-interaction-limits',
    )
    permission_profile = marshmallow.fields.String(
        data_key='permission-profile',
    )
    permission_starring = marshmallow.fields.String(
        data_key='permission-starring',
    )


@attr.s(frozen=True)
class CreateGithubAppToken(wetwire.contract.Action):
    action_reference = 'actions/create-github-app-token@v1'
    inputs_schema = CreateGithubAppTokenSchema

    app_id = attr.ib(default='')
    private_key = attr.ib(default='')
    owner = attr.ib(default='')
    repositories = attr.ib(default='')
    skip_token_revoke = attr.ib(default=False)
    github_api_url = attr.ib(default='')
    permission_actions = attr.ib(default='')
    permission_administration = attr.ib(default='')
    permission_checks = attr.ib(default='')
    permission_codespaces = attr.ib(default='')
    permission_contents = attr.ib(default='')
    permission_dependabot_secrets = attr.ib(default='')
    permission_deployments = attr.ib(default='')
    permission_environments = attr.ib(default='')
    permission_issues = attr.ib(default='')
    permission_metadata = attr.ib(default='')
    permission_packages = attr.ib(default='')
    permission_pages = attr.ib(default='')
    permission_pull_requests = attr.ib(default='')
    permission_repository_hooks = attr.ib(default='')
    permission_repository_projects = attr.ib(default='')
    permission_secret_scanning_alerts = attr.ib(default='')
    permission_secrets = attr.ib(default='')
    permission_security_events = attr.ib(default='')
    permission_statuses = attr.ib(default='')
    permission_vulnerability_alerts = attr.ib(default='')
    permission_workflows = attr.ib(default='')
    permission_members = attr.ib(default='')
    permission_organization_administration = attr.ib(default='')
    permission_organization_events = attr.ib(default='')
    permission_organization_hooks = attr.ib(default='')
    permission_organization_packages = attr.ib(default='')
    permission_organization_plan = attr.ib(default='')
    permission_organization_projects = attr.ib(default='')
    permission_organization_secrets = attr.ib(default='')
    permission_organization_self_hosted_runners = attr.ib(default='')
    permission_organization_user_blocking = attr.ib(default='')
    permission_team_discussions = attr.ib(default='')
    permission_email_addresses = attr.ib(default='')
    permission_followers = attr.ib(default='')
    permission_git_ssh_keys = attr.ib(default='')
    permission_gpg_keys = attr.ib(default='')
    permission_interaction_limits = attr.ib(default='')
    permission_profile = attr.ib(default='')
    permission_starring = attr.ib(default='')
