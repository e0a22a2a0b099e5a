from foodtrucks.sources.sfgov.source import SfGovSource

SOURCES = {
    "sfgov": SfGovSource,
}
