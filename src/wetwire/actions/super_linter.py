import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class SuperLinterSchema(wetwire.contract.InputsSchema):
    validate_all_codebase = wetwire.utils.Boolean()
    default_branch = marshmallow.fields.String()
    github_token = marshmallow.fields.String()
    filter_regex_exclude = marshmallow.fields.String()
    filter_regex_include = marshmallow.fields.String()
    log_level = marshmallow.fields.String()
    output_format = marshmallow.fields.String()
    output_details = marshmallow.fields.String()
    validate_go = wetwire.utils.Boolean()
    validate_javascript = wetwire.utils.Boolean()
    validate_typescript = wetwire.utils.Boolean()
    validate_python = wetwire.utils.Boolean()
    validate_yaml = wetwire.utils.Boolean()
    validate_json = wetwire.utils.Boolean()
    validate_markdown = wetwire.utils.Boolean()
    validate_dockerfile = wetwire.utils.Boolean()
    validate_bash = wetwire.utils.Boolean()
    default_workspace = marshmallow.fields.String()
    linter_rules_path = marshmallow.fields.String()


@attr.s(frozen=True)
class SuperLinter(wetwire.contract.Action):
    action_reference = 'super-linter/super-linter@v7'
    inputs_schema = SuperLinterSchema

    validate_all_codebase = attr.ib(default=False)
    default_branch = attr.ib(default='')
    github_token = attr.ib(default='')
    filter_regex_exclude = attr.ib(default='')
    filter_regex_include = attr.ib(default='')
    log_level = attr.ib(default='')
    output_format = attr.ib(default='')
    output_details = attr.ib(default='')
    validate_go = attr.ib(default=False)
    validate_javascript = attr.ib(default=False)
    validate_typescript = attr.ib(default=False)
    validate_python = attr.ib(default=False)
    validate_yaml = attr.ib(default=False)
    validate_json = attr.ib(default=False)
    validate_markdown = attr.ib(default=False)
    validate_dockerfile = attr.ib(default=False)
    validate_bash = attr.ib(default=False)
    default_workspace = attr.ib(default='')
    linter_rules_path = attr.ib(default='')
