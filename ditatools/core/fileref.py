import os
import posixpath
from pathlib import Path
from urllib.parse import unquote, urlsplit, urlunsplit


def path_to_url(file_path: str) -> str:
    """
    :param file_path: C:\\Users\\john\\doc src\\manual.xml
    :return: file:///C:/Users/john/doc%20src/manual.xml
    """
    return Path(os.path.abspath(file_path)).as_uri()


def url_parent(url: str) -> str:
    """
    Parent of a URL, always ending with '/'. Empty string when the URL has no parent.
    """
    parts = urlsplit(url)
    url_path = parts.path
    if url_path.endswith('/'):
        url_path = url_path[:-1]
    slash = url_path.rfind('/')
    if slash < 0:
        return ''
    return urlunsplit((parts.scheme, parts.netloc, url_path[:slash + 1], '', ''))


def url_base_name(url: str) -> str:
    url_path = urlsplit(url).path.rstrip('/')
    return unquote(url_path.rsplit('/', 1)[-1])


def split_extension(name: str) -> tuple[str, str]:
    """
    :return: ('manual', 'xml') for 'manual.xml', ('README', '') for 'README'
    """
    root, ext = posixpath.splitext(name)
    return root, ext[1:]


class FileLocation:
    """
    A file referenced both by its canonical path and by the equivalent file: URL.
    """

    def __init__(self, path: str, url: str | None = None) -> None:
        self.path = path
        self.url = url if url is not None else path_to_url(path)

    @classmethod
    def from_path(cls, path: str | os.PathLike) -> 'FileLocation':
        return cls(os.path.realpath(os.path.abspath(path)))

    def __repr__(self) -> str:
        return '<FileLocation: ' + self.path + '>'

    def __eq__(self, other) -> bool:
        return isinstance(other, FileLocation) and self.path == other.path and self.url == other.url

    def __hash__(self) -> int:
        return hash((self.path, self.url))

    # Path form

    @property
    def parent(self) -> str:
        parent = os.path.dirname(self.path)
        if parent == self.path:  # filesystem root
            return ''
        return parent

    @property
    def name(self) -> str:
        return os.path.basename(self.path)

    @property
    def root_name(self) -> str:
        return split_extension(self.name)[0]

    @property
    def extension(self) -> str:
        return split_extension(self.name)[1]

    # URL form

    @property
    def parent_url(self) -> str:
        return url_parent(self.url)

    @property
    def url_name(self) -> str:
        return url_base_name(self.url)

    @property
    def url_root_name(self) -> str:
        return split_extension(self.url_name)[0]

    @property
    def url_extension(self) -> str:
        return split_extension(self.url_name)[1]
