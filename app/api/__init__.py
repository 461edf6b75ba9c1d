from fastapi import APIRouter, FastAPI
import importlib, pkgutil, logging

# 이 패키지(root)
PACKAGE_NAME = __name__

logger = logging.getLogger(__name__)


def include_all_routers(app: FastAPI) -> list[str]:
    """
    app/api 패키지의 모든 모듈을 스캔해서 ROUTERS 리스트(또는 top-level APIRouter)를
    app에 include하고, 등록한 모듈 이름을 반환한다.
    """
    package = importlib.import_module(PACKAGE_NAME)
    included = []

    for modinfo in sorted(pkgutil.iter_modules(package.__path__), key=lambda m: m.name):
        # _ 로 시작하는 내부 모듈은 무시
        if modinfo.name.startswith("_"):
            continue

        module = importlib.import_module(f"{PACKAGE_NAME}.{modinfo.name}")

        routers = getattr(module, "ROUTERS", None)
        if not isinstance(routers, (list, tuple)):
            routers = [getattr(module, n) for n in dir(module)]

        found = [r for r in routers if isinstance(r, APIRouter)]
        for r in found:
            app.include_router(r)
        if found:
            included.append(modinfo.name)

    logger.debug(f"routers included: {included}")
    return included
