import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class GolangciLintSchema(wetwire.contract.InputsSchema):
    version = marshmallow.fields.String()
    working_directory = marshmallow.fields.String(data_key='working-directory')
    args = marshmallow.fields.String()
    only_new_issues = wetwire.utils.Boolean(data_key='only-new-issues')
    skip_build_cache = wetwire.utils.Boolean(data_key='skip-build-cache')
    skip_pkg_cache = wetwire.utils.Boolean(data_key='skip-pkg-cache')
    problem_matchers = wetwire.utils.Boolean(data_key='problem-matchers')
    github_token = marshmallow.fields.String(data_key='github-token')
    install_mode = marshmallow.fields.String(data_key='install-mode')
    go_modules = wetwire.utils.Boolean(data_key='go-modules')
    skip_cache = wetwire.utils.Boolean(data_key='skip-cache')


@attr.s(frozen=True)
class GolangciLint(wetwire.contract.Action):
    action_reference = 'golangci/golangci-lint-action@v6'
    inputs_schema = GolangciLintSchema

    version = attr.ib(default='')
    working_directory = attr.ib(default='')
    args = attr.ib(default='')
    only_new_issues = attr.ib(default=False)
    skip_build_cache = attr.ib(default=False)
    skip_pkg_cache = attr.ib(default=False)
    problem_matchers = attr.ib(default=False)
    github_token = attr.ib(default='')
    install_mode = attr.ib(default='')
    go_modules = attr.ib(default=False)
    skip_cache = attr.ib(default=False)
