import attr
import marshmallow

import wetwire.contract
import wetwire.utils


class HelmChartReleaserSchema(wetwire.contract.InputsSchema):
    version = marshmallow.fields.String()
    config = marshmallow.fields.String()
    charts_dir = marshmallow.fields.String()
    charts_repo_url = marshmallow.fields.String()
    install_dir = marshmallow.fields.String()
    install_only = wetwire.utils.Boolean()
    skip_packaging = wetwire.utils.Boolean()
    skip_existing = wetwire.utils.Boolean()
    skip_upload = wetwire.utils.Boolean()
    mark_as_latest = wetwire.utils.Boolean()
    packages_with_index = wetwire.utils.Boolean()
    pages_branch = marshmallow.fields.String()


@attr.s(frozen=True)
class HelmChartReleaser(wetwire.contract.Action):
    action_reference = 'helm/chart-releaser-action@v1'
    inputs_schema = HelmChartReleaserSchema

    version = attr.ib(default='')
    config = attr.ib(default='')
    charts_dir = attr.ib(default='')
    charts_repo_url = attr.ib(default='')
    install_dir = attr.ib(default='')
    install_only = attr.ib(default=False)
    skip_packaging = attr.ib(default=False)
    skip_existing = attr.ib(default=False)
    skip_upload = attr.ib(default=False)
    mark_as_latest = attr.ib(default=False)
    packages_with_index = attr.ib(default=False)
    pages_branch = attr.ib(default='')
