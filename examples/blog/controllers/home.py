"""Landing and health-check handlers."""


def root(request):
    return {"name": "blog", "version": 1}


def health(request):
    return ""
