import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class GHPagesPeaceirisSchema(wetwire.contract.InputsSchema):
    deploy_key = marshmallow.fields.String()
    github_token = marshmallow.fields.String()
    personal_token = marshmallow.fields.String()
    publish_branch = marshmallow.fields.String()
    publish_dir = marshmallow.fields.String()
    destination_dir = marshmallow.fields.String()
    external_repository = marshmallow.fields.String()
    allow_empty_commit = wetwire.utils.Boolean()
    keep_files = wetwire.utils.Boolean()
    force_orphan = wetwire.utils.Boolean()
    user_name = marshmallow.fields.String()
    user_email = marshmallow.fields.String()
    commit_message = marshmallow.fields.String()
    full_commit_message = marshmallow.fields.String()
    tag_name = marshmallow.fields.String()
    tag_message = marshmallow.fields.String()
    enable_jekyll = wetwire.utils.Boolean()
    disable_nojekyll = wetwire.utils.Boolean()
    cname = marshmallow.fields.String()
    exclude_assets = marshmallow.fields.String()


@attr.s(frozen=True)
class GHPagesPeaceiris(wetwire.contract.Action):
    action_reference = 'peaceiris/actions-gh-pages@v4'
    inputs_schema = GHPagesPeaceirisSchema

    deploy_key = attr.ib(default='')
    github_token = attr.ib(default='')
    personal_token = attr.ib(default='')
    publish_branch = attr.ib(default='')
    publish_dir = attr.ib(default='')
    destination_dir = attr.ib(default='')
    external_repository = attr.ib(default='')
    allow_empty_commit = attr.ib(default=False)
    keep_files = attr.ib(default=False)
    force_orphan = attr.ib(default=False)
    user_name = attr.ib(default='')
    user_email = attr.ib(default='')
    commit_message = attr.ib(default='')
    full_commit_message = attr.ib(default='')
    tag_name = attr.ib(default='')
    tag_message = attr.ib(default='')
    enable_jekyll = attr.ib(default=False)
    disable_nojekyll = attr.ib(default=False)
    cname = attr.ib(default='')
    exclude_assets = attr.ib(default='')
