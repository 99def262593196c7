"""Page replacement policies for a buffer pool."""

from collections import OrderedDict

# Ratio kept between the old and young halves of the midpoint-insertion list.
FACTOR = 3


class LRUReplacer:
    """Evicts the frame that was unpinned longest ago."""

    def __init__(self, num_pages):
        self.num_pages = num_pages
        self._queue = OrderedDict()

    def victim(self):
        """Remove and return the frame to evict, or None when there is none."""
        if not self._queue:
            return None
        frame_id, _ = self._queue.popitem(last=False)
        return frame_id

    def pin(self, frame_id):
        self._queue.pop(frame_id, None)

    def unpin(self, frame_id):
        if len(self._queue) >= self.num_pages:
            return
        self._queue.pop(frame_id, None)
        self._queue[frame_id] = frame_id

    def __len__(self):
        return len(self._queue)

    def clear(self):
        self._queue.clear()


class InnodbReplacer:
    """Midpoint-insertion replacer with an old half and a young half."""

    def __init__(self, num_pages):
        self.num_pages = num_pages
        self._old = OrderedDict()
        self._young = OrderedDict()

    def _adjust(self):
        while len(self._old) * FACTOR < len(self._young):
            frame_id, _ = self._young.popitem(last=False)
            self._old[frame_id] = frame_id

    def victim(self):
        """Remove and return the frame to evict, or None when there is none."""
        if not self._old and not self._young:
            return None
        self._adjust()
        frame_id, _ = self._old.popitem(last=False)
        self._adjust()
        return frame_id

    def pin(self, frame_id):
        if frame_id in self._old:
            del self._old[frame_id]
            self._adjust()
        else:
            self._young.pop(frame_id, None)

    def unpin(self, frame_id):
        if len(self) >= self.num_pages:
            return
        if frame_id not in self._old and frame_id not in self._young:
            self._young[frame_id] = frame_id
            self._young.move_to_end(frame_id, last=False)
            self._adjust()

    def __len__(self):
        return len(self._old) + len(self._young)