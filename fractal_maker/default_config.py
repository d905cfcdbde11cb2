"""
Default config for application.

Overrides are read from a JSON file passed as the first command line
argument, for example:

```
{
    "image_shape": [768, 768],
    "formula": 13,
    "seed": 42
}
```

Keys are the attribute names of `Config`, see `config.load_config`.
"""


class Config:

    title = "Fractal Maker"
    """
    Title of the main window.
    """

    image_shape = (512, 512)
    """
    Shape of the image, in pixels, as (width, height). Fixed for the lifetime of the window.
    """

    formula = 0
    """
    Index of the formula shown on startup.
    """

    seed = None
    """
    Seed for noise formulas. `None` gives different noise on every run.
    """

    workers = 1
    """
    How many threads to split image rows between when computing non-random formulas.
    """

    use_alpha = False
    """
    Whether to display the top byte of each pixel as alpha instead of ignoring it.
    """

    log_level = "INFO"
    """
    Logging level name.
    """
