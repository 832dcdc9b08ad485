import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class DependencyReviewSchema(wetwire.contract.InputsSchema):
    fail_on_severity = marshmallow.fields.String(data_key='fail-on-severity')
    fail_on_scopes = marshmallow.fields.String(data_key='fail-on-scopes')
    allow_licenses = marshmallow.fields.String(data_key='allow-licenses')
    deny_licenses = marshmallow.fields.String(data_key='deny-licenses')
    allow_ghsas = marshmallow.fields.String(data_key='allow-ghsas')
    config_file = marshmallow.fields.String(data_key='config-file')
    base_ref = marshmallow.fields.String(data_key='base-ref')
    head_ref = marshmallow.fields.String(data_key='head-ref')
    comment_summary_in_pr = wetwire.utils.Boolean(
        data_key='comment-summary-in-pr',
    )
    warn_only = wetwire.utils.Boolean(data_key='warn-only')
    license_check = wetwire.utils.Boolean(data_key='license-check')
    vulnerability_check = wetwire.utils.Boolean(
        data_key='vulnerability-check',
    )
    retry_on_snapshot_warnings = wetwire.utils.Boolean(
        data_key='retry-on-snapshot-warnings',
    )


@attr.s(frozen=True)
class DependencyReview(wetwire.contract.Action):
    action_reference = 'actions/dependency-review-action@v4'
    inputs_schema = DependencyReviewSchema

    fail_on_severity = attr.ib(default='')
    fail_on_scopes = attr.ib(default='')
    allow_licenses = attr.ib(default='')
    deny_licenses = attr.ib(default='')
    allow_ghsas = attr.ib(default='')
    config_file = attr.ib(default='')
    base_ref = attr.ib(default='')
    head_ref = attr.ib(default='')
    comment_summary_in_pr = attr.ib(default=False)
    warn_only = attr.ib(default=False)
    license_check = attr.ib(default=False)
    vulnerability_check = attr.ib(default=False)
    retry_on_snapshot_warnings = attr.ib(default=False)
