"""
base — нейтральный слой инфраструктуры.

Назначение:
- выбрать FileStore (plugin или local) через runtime
- дать примитивы файлового дескриптора (filestore)
- дать InputStream/OutputStream (streams)
- дать scoped-API "открыть, отдать поток, гарантированно закрыть" (ioapi)
"""

from iostreams.base import runtime  # noqa: F401
