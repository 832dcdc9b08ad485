import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class SetupRubySchema(wetwire.contract.InputsSchema):
    ruby_version = marshmallow.fields.String(data_key='ruby-version')
    ruby_version_file = marshmallow.fields.String(data_key='ruby-version-file')
    bundler = marshmallow.fields.String()
    bundler_version = marshmallow.fields.String(data_key='bundler-version')
    bundler_cache = wetwire.utils.Boolean(data_key='bundler-cache')
    cache_version = marshmallow.fields.String(data_key='cache-version')
    working_directory = marshmallow.fields.String(data_key='working-directory')
    rubygems = marshmallow.fields.String()
    bundler_no_lock = wetwire.utils.Boolean(data_key='bundler-no-lock')


@attr.s(frozen=True)
class SetupRuby(wetwire.contract.Action):
    action_reference = 'ruby/setup-ruby@v1'
    inputs_schema = SetupRubySchema

    ruby_version = attr.ib(default='')
    ruby_version_file = attr.ib(default='')
    bundler = attr.ib(default='')
    bundler_version = attr.ib(default='')
    bundler_cache = attr.ib(default=False)
    cache_version = attr.ib(default='')
    working_directory = attr.ib(default='')
    rubygems = attr.ib(default='')
    bundler_no_lock = attr.ib(default=False)
