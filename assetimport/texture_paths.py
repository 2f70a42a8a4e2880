"""
Common directory of all texture paths recorded for a scene, and rebasing of
those paths when the textures are moved somewhere else.
"""


def normalize_directory(path):
    """Forward slashes, always ending with '/'."""
    path = str(path).replace("\\", "/")
    if not path.endswith("/"):
        path += "/"
    return path


def common_prefix(paths):
    """Longest prefix shared by all paths, cut back to the last '/'."""
    if not paths:
        return None
    first = paths[0]
    k = len(first)
    for path in paths[1:]:
        k = min(k, len(path))
        for j in range(k):
            if path[j] != first[j]:
                k = j
                break
    common = first[:k]
    if not common.endswith("/"):
        common = common[:common.rfind("/") + 1]
    return common


class CommonTexturePath:
    """Keeps the list of TexturePaths and a cached common directory."""

    def __init__(self, texture_paths=None):
        self.texture_paths = texture_paths if texture_paths is not None else []
        self._cached = None

    def __len__(self):
        return len(self.texture_paths)

    def add(self, texture_path):
        self.texture_paths.append(texture_path)
        self._cached = None

    def get(self):
        if not self.texture_paths:
            return None
        if self._cached is None:
            self._cached = common_prefix([p.path for p in self.texture_paths])
        return self._cached

    def set(self, new_root):
        """Replace the common directory of every stored path with `new_root`."""
        if not self.texture_paths:
            return
        old_root = self.get()
        new_root = normalize_directory(new_root)
        for p in self.texture_paths:
            if p.path.startswith(old_root):
                p.path = new_root + p.path[len(old_root):]
        self._cached = None

    def invalidate(self):
        self._cached = None
