import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class StaleSchema(wetwire.contract.InputsSchema):
    repo_token = marshmallow.fields.String(data_key='repo-token')
    stale_issue_message = marshmallow.fields.String(
        data_key='stale-issue-message',
    )
    stale_pr_message = marshmallow.fields.String(data_key='stale-pr-message')
    close_issue_message = marshmallow.fields.String(
        data_key='close-issue-message',
    )
    close_pr_message = marshmallow.fields.String(data_key='close-pr-message')
    days_before_stale = wetwire.utils.Integer(
        data_key='days-before-stale',
    )
    days_before_close = wetwire.utils.Integer(
        data_key='days-before-close',
    )
    days_before_issue_stale = wetwire.utils.Integer(
        data_key='days-before-issue-stale',
    )
    days_before_pr_stale = wetwire.utils.Integer(
        data_key='days-before-pr-stale',
    )
    days_before_issue_close = wetwire.utils.Integer(
        data_key='days-before-issue-close',
    )
    days_before_pr_close = wetwire.utils.Integer(
        data_key='days-before-pr-close',
    )
    stale_issue_label = marshmallow.fields.String(data_key='stale-issue-label')
    stale_pr_label = marshmallow.fields.String(data_key='stale-pr-label')
    exempt_issue_labels = marshmallow.fields.String(
        data_key='exempt-issue-labels',
    )
    exempt_pr_labels = marshmallow.fields.String(data_key='exempt-pr-labels')
    only_labels = marshmallow.fields.String(data_key='only-labels')
    only_issue_labels = marshmallow.fields.String(data_key='only-issue-labels')
    only_pr_labels = marshmallow.fields.String(data_key='only-pr-labels')
    operations_per_run = wetwire.utils.Integer(
        data_key='operations-per-run',
    )
    remove_stale_when_updated = wetwire.utils.Boolean(
        data_key='remove-stale-when-updated',
    )
    remove_issue_stale_when_updated = wetwire.utils.Boolean(
        data_key='remove-issue-stale-when-updated',
    )
    remove_pr_stale_when_updated = wetwire.utils.Boolean(
        data_key='remove-pr-stale-when-updated',
    )
    debug_only = wetwire.utils.Boolean(data_key='debug-only')
    ascending = wetwire.utils.Boolean()
    delete_branch = wetwire.utils.Boolean(data_key='delete-branch')
    start_date = marshmallow.fields.String(data_key='start-date')
    exempt_assignees = wetwire.utils.Boolean(data_key='exempt-assignees')
    exempt_issue_assignees = wetwire.utils.Boolean(
        data_key='exempt-issue-assignees',
    )
    exempt_pr_assignees = wetwire.utils.Boolean(
        data_key='exempt-pr-assignees',
    )
    exempt_milestones = wetwire.utils.Boolean(
        data_key='exempt-milestones',
    )
    exempt_issue_milestones = wetwire.utils.Boolean(
        data_key='exempt-issue-milestones',
    )
    exempt_pr_milestones = wetwire.utils.Boolean(
        data_key='exempt-pr-milestones',
    )
    exempt_all_milestones = wetwire.utils.Boolean(
        data_key='exempt-all-milestones',
    )
    exempt_all_issue_milestones = wetwire.utils.Boolean(
        data_key='exempt-all-issue-milestones',
    )
    exempt_all_pr_milestones = wetwire.utils.Boolean(
        data_key='exempt-all-pr-milestones',
    )
    enable_statistics = wetwire.utils.Boolean(
        data_key='enable-statistics',
    )
    labels_to_remove_when_stale = marshmallow.fields.String(
        data_key='labels-to-remove-when-stale',
    )
    labels_to_add_when_unstale = marshmallow.fields.String(
        data_key='labels-to-add-when-unstale',
    )
    ignore_issues = wetwire.utils.Boolean(data_key='ignore-issues')
    ignore_prs = wetwire.utils.Boolean(data_key='ignore-prs')
    ignore_updates = wetwire.utils.Boolean(data_key='ignore-updates')
    close_issue_label = marshmallow.fields.String(data_key='close-issue-label')
    close_pr_label = marshmallow.fields.String(data_key='close-pr-label')
    any_of_labels = marshmallow.fields.String(data_key='any-of-labels')
    any_of_issue_labels = marshmallow.fields.String(
        data_key='any-of-issue-labels',
    )
    any_of_pr_labels = marshmallow.fields.String(data_key='any-of-pr-labels')
    include_only_assigned = wetwire.utils.Boolean(
        data_key='include-only-assigned',
    )


@attr.s(frozen=True)
class Stale(wetwire.contract.Action):
    action_reference = 'actions/stale@v9'
    inputs_schema = StaleSchema

    repo_token = attr.ib(default='')
    stale_issue_message = attr.ib(default='')
    stale_pr_message = attr.ib(default='')
    close_issue_message = attr.ib(default='')
    close_pr_message = attr.ib(default='')
    days_before_stale = attr.ib(default=0)
    days_before_close = attr.ib(default=0)
    days_before_issue_stale = attr.ib(default=0)
    days_before_pr_stale = attr.ib(default=0)
    days_before_issue_close = attr.ib(default=0)
    days_before_pr_close = attr.ib(default=0)
    stale_issue_label = attr.ib(default='')
    stale_pr_label = attr.ib(default='')
    exempt_issue_labels = attr.ib(default='')
    exempt_pr_labels = attr.ib(default='')
    only_labels = attr.ib(default='')
    only_issue_labels = attr.ib(default='')
    only_pr_labels = attr.ib(default='')
    operations_per_run = attr.ib(default=0)
    remove_stale_when_updated = attr.ib(default=False)
    remove_issue_stale_when_updated = attr.ib(default=False)
    remove_pr_stale_when_updated = attr.ib(default=False)
    debug_only = attr.ib(default=False)
    ascending = attr.ib(default=False)
    delete_branch = attr.ib(default=False)
    start_date = attr.ib(default='')
    exempt_assignees = attr.ib(default=False)
    exempt_issue_assignees = attr.ib(default=False)
    exempt_pr_assignees = attr.ib(default=False)
    exempt_milestones = attr.ib(default=False)
    exempt_issue_milestones = attr.ib(default=False)
    exempt_pr_milestones = attr.ib(default=False)
    exempt_all_milestones = attr.ib(default=False)
    exempt_all_issue_milestones = attr.ib(default=False)
    exempt_all_pr_milestones = attr.ib(default=False)
    enable_statistics = attr.ib(default=False)
    labels_to_remove_when_stale = attr.ib(default='')
    labels_to_add_when_unstale = attr.ib(default='')
    ignore_issues = attr.ib(default=False)
    ignore_prs = attr.ib(default=False)
    ignore_updates = attr.ib(default=False)
    close_issue_label = attr.ib(default='')
    close_pr_label = attr.ib(default='')
    any_of_labels = attr.ib(default='')
    any_of_issue_labels = attr.ib(default='')
    any_of_pr_labels = attr.ib(default='')
    include_only_assigned = attr.ib(default=False)
