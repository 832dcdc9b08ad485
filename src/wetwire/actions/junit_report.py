import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class JUnitReportSchema(wetwire.contract.InputsSchema):
    report_paths = marshmallow.fields.String()
    token = marshmallow.fields.String()
    group_reports = wetwire.utils.Boolean()
    test_files_prefix = marshmallow.fields.String()
    exclude_sources = marshmallow.fields.String()
    check_name = marshmallow.fields.String()
    commit = marshmallow.fields.String()
    fail_on_failure = wetwire.utils.Boolean()
    fail_on_parse_error = wetwire.utils.Boolean()
    require_tests = wetwire.utils.Boolean()
    require_passed_tests = wetwire.utils.Boolean()
    include_passed = wetwire.utils.Boolean()
    include_skipped = wetwire.utils.Boolean()
    check_retries = wetwire.utils.Boolean()
    check_title_template = marshmallow.fields.String()
    bread_crumb_delimiter = marshmallow.fields.String()
    summary = marshmallow.fields.String()
    check_annotations = wetwire.utils.Boolean()
    update_check = wetwire.utils.Boolean()
    annotate_only = wetwire.utils.Boolean()
    transformers = marshmallow.fields.String()
    job_summary = wetwire.utils.Boolean()
    job_summary_text = marshmallow.fields.String()
    detailed_summary = wetwire.utils.Boolean()
    flaky_summary = wetwire.utils.Boolean()
    verbose_summary = wetwire.utils.Boolean()
    skip_success_summary = wetwire.utils.Boolean()
    include_empty_in_summary = wetwire.utils.Boolean()
    include_time_in_summary = wetwire.utils.Boolean()
    simplified_summary = wetwire.utils.Boolean()
    group_suite = wetwire.utils.Boolean()
    comment = wetwire.utils.Boolean()
    update_comment = wetwire.utils.Boolean(data_key='updateComment')
    annotate_notice = wetwire.utils.Boolean()
    follow_symlink = wetwire.utils.Boolean()
    job_name = marshmallow.fields.String()
    annotations_limit = wetwire.utils.Integer()
    skip_annotations = wetwire.utils.Boolean()
    truncate_stack_traces = wetwire.utils.Boolean()
    resolve_ignore_classname = wetwire.utils.Boolean()
    skip_comment_without_tests = wetwire.utils.Boolean()
    pr_id = wetwire.utils.Integer()


@attr.s(frozen=True)
class JUnitReport(wetwire.contract.Action):
    action_reference = 'mikepenz/action-junit-report@v4'
    inputs_schema = JUnitReportSchema

    report_paths = attr.ib(default='')
    token = attr.ib(default='')
    group_reports = attr.ib(default=False)
    test_files_prefix = attr.ib(default='')
    exclude_sources = attr.ib(default='')
    check_name = attr.ib(default='')
    commit = attr.ib(default='')
    fail_on_failure = attr.ib(default=False)
    fail_on_parse_error = attr.ib(default=False)
    require_tests = attr.ib(default=False)
    require_passed_tests = attr.ib(default=False)
    include_passed = attr.ib(default=False)
    include_skipped = attr.ib(default=False)
    check_retries = attr.ib(default=False)
    check_title_template = attr.ib(default='')
    bread_crumb_delimiter = attr.ib(default='')
    summary = attr.ib(default='')
    check_annotations = attr.ib(default=False)
    update_check = attr.ib(default=False)
    annotate_only = attr.ib(default=False)
    transformers = attr.ib(default='')
    job_summary = attr.ib(default=False)
    job_summary_text = attr.ib(default='')
    detailed_summary = attr.ib(default=False)
    flaky_summary = attr.ib(default=False)
    verbose_summary = attr.ib(default=False)
    skip_success_summary = attr.ib(default=False)
    include_empty_in_summary = attr.ib(default=False)
    include_time_in_summary = attr.ib(default=False)
    simplified_summary = attr.ib(default=False)
    group_suite = attr.ib(default=False)
    comment = attr.ib(default=False)
    update_comment = attr.ib(default=False)
    annotate_notice = attr.ib(default=False)
    follow_symlink = attr.ib(default=False)
    job_name = attr.ib(default='')
    annotations_limit = attr.ib(default=0)
    skip_annotations = attr.ib(default=False)
    truncate_stack_traces = attr.ib(default=False)
    resolve_ignore_classname = attr.ib(default=False)
    skip_comment_without_tests = attr.ib(default=False)
    pr_id = attr.ib(default=0)
