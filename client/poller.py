# client/poller.py
import logging
import threading
from datetime import datetime

import requests
from apscheduler.schedulers.background import BackgroundScheduler

from client.api import ApiError

logger = logging.getLogger(__name__)

POLL_INTERVAL_SECONDS = 5


class RoomPoller:
    """
    Re-fetches a room's detail on a fixed interval while the room view is open.

    start() when entering the room view, stop() when leaving it (or use the
    poller as a context manager). Each successful snapshot replaces `latest`
    and is handed to `on_update`; failures go to `on_error` and the loop keeps
    running. Snapshots that arrive after stop() are dropped.
    """

    def __init__(self, client, room_id, on_update, on_error=None,
                 interval=POLL_INTERVAL_SECONDS, scheduler=None):
        self.client = client
        self.room_id = room_id
        self.on_update = on_update
        self.on_error = on_error
        self.interval = interval
        self.latest = None

        self._owns_scheduler = scheduler is None
        self._scheduler = scheduler or BackgroundScheduler()
        self._job_id = f"room-poll-{room_id}"
        self._active = False
        # guards _active and delivery so stop() never races an update
        self._lock = threading.RLock()

    @property
    def active(self):
        return self._active

    def start(self):
        if self._active:
            return self
        self._active = True
        self._scheduler.add_job(
            self.poll_once,
            'interval',
            seconds=self.interval,
            id=self._job_id,
            next_run_time=datetime.now(),  # first fetch right away
            max_instances=1,               # never overlap an in-flight poll
            coalesce=True,
            replace_existing=True,
        )
        if not self._scheduler.running:
            self._scheduler.start()
        logger.debug("Polling room %s every %ss", self.room_id, self.interval)
        return self

    def stop(self):
        with self._lock:
            if not self._active:
                return
            self._active = False
        if self._scheduler.get_job(self._job_id):
            self._scheduler.remove_job(self._job_id)
        if self._owns_scheduler and self._scheduler.running:
            self._scheduler.shutdown(wait=False)
        logger.debug("Stopped polling room %s", self.room_id)

    def poll_once(self):
        try:
            snapshot = self.client.get_room(self.room_id)
        except (ApiError, requests.RequestException) as e:
            if not self._active:
                return None
            logger.warning("Room %s poll failed: %s", self.room_id, e)
            if self.on_error:
                self.on_error(e)
            return None

        with self._lock:
            if not self._active:
                return None
            self.latest = snapshot
            self.on_update(snapshot)
        return snapshot

    def __enter__(self):
        return self.start()

    def __exit__(self, exc_type, exc, tb):
        self.stop()
