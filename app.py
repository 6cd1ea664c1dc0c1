import logging
import os

import aws_cdk as cdk
from static_site.configs.site_cfg import get_cfg
from static_site.stacks.site_stack import StaticSiteStack

logging.basicConfig(
    level=os.environ.get("STATIC_SITE_LOG_LEVEL", "WARNING").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = cdk.App()
cfg = get_cfg(app)

StaticSiteStack(
    app,
    cfg.stack_name,
    env=cfg.env.cdk_environment,
    **cfg.site.as_kwargs(),
)

app.synth()
