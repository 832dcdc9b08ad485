import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class GHReleaseSchema(wetwire.contract.InputsSchema):
    body = marshmallow.fields.String()
    body_path = marshmallow.fields.String()
    name = marshmallow.fields.String()
    tag_name = marshmallow.fields.String()
    target_commitish = marshmallow.fields.String()
    draft = wetwire.utils.Boolean()
    prerelease = wetwire.utils.Boolean()
    generate_release_notes = wetwire.utils.Boolean()
    files = marshmallow.fields.String()
    fail_on_unmatched_files = wetwire.utils.Boolean()
    token = marshmallow.fields.String()
    repository = marshmallow.fields.String()
    append_body = wetwire.utils.Boolean()
    make_latest = marshmallow.fields.String()
    discussion_category_name = marshmallow.fields.String()


@attr.s(frozen=True)
class GHRelease(wetwire.contract.Action):
    action_reference = 'softprops/action-gh-release@v2'
    inputs_schema = GHReleaseSchema

    body = attr.ib(default='')
    body_path = attr.ib(default='')
    name = attr.ib(default='')
    tag_name = attr.ib(default='')
    target_commitish = attr.ib(default='')
    draft = attr.ib(default=False)
    prerelease = attr.ib(default=False)
    generate_release_notes = attr.ib(default=False)
    files = attr.ib(default='')
    fail_on_unmatched_files = attr.ib(default=False)
    token = attr.ib(default='')
    repository = attr.ib(default='')
    append_body = attr.ib(default=False)
    make_latest = attr.ib(default='')
    discussion_category_name = attr.ib(default='')
