"""
Queue-specific SSE Handler
Pushes queue stats to the browser whenever they change
"""
import json
import logging
import time

from flask import Response, stream_with_context

from owner_console.core.api_client import ApiClientError, SessionExpiredError

logger = logging.getLogger(__name__)

RECONNECT_MESSAGE = 'Session tokens were refreshed. Please reconnect.'


class QueueSSEHandler:
    """Handle SSE streaming for queue stats updates

    The session cookie is written before the stream starts, so tokens cannot
    be saved from inside it. The route takes the first snapshot during the
    request (any refresh lands in the cookie) and passes it as initial_state.
    When the access token in token_store changes mid-stream the stream ends
    with an error event asking the browser to reconnect.
    """

    def __init__(self, service, interval=10, heartbeat=30, sleep=time.sleep, clock=time.monotonic,
                 token_store=None, initial_state=None):
        self.service = service
        self.interval = interval
        self.heartbeat = heartbeat
        self.sleep = sleep
        self.clock = clock
        self.token_store = token_store
        self.initial_state = initial_state
        self._failing = False

    @staticmethod
    def format_event(payload, event=None):
        lines = []
        if event:
            lines.append(f'event: {event}')
        lines.append(f'data: {json.dumps(payload)}')
        return '\n'.join(lines) + '\n\n'

    def poll(self):
        """Current overview; backend failures become an error state

        SessionExpiredError propagates.
        """
        try:
            state = self.service.get_overview()
        except SessionExpiredError:
            raise
        except ApiClientError as e:
            if not self._failing:
                logger.warning(f'[QUEUE] SSE stats unavailable: {e.message}')
            self._failing = True
            return {'queues': {}, 'summary': {}, 'error': e.message}
        self._failing = False
        return state

    def _access_token(self):
        if self.token_store is None:
            return None
        return self.token_store.get_access_token()

    def generate(self, max_polls=None):
        """Yield SSE frames; runs until the client disconnects or max_polls is reached"""
        last_state = None
        last_sent = self.clock()
        access_token = self._access_token()
        pending = self.initial_state
        polls = 0

        while max_polls is None or polls < max_polls:
            polls += 1
            if pending is not None:
                current_state, pending = pending, None
            else:
                try:
                    current_state = self.poll()
                except SessionExpiredError as e:
                    yield self.format_event({'error': e.message, 'redirect': e.redirect}, 'error')
                    return

            if self._access_token() != access_token:
                logger.info('[QUEUE] Tokens refreshed during SSE stream, asking client to reconnect')
                yield self.format_event({'error': RECONNECT_MESSAGE, 'reconnect': True}, 'error')
                return

            # Only send when the stats changed
            if current_state != last_state:
                yield self.format_event(dict(current_state, timestamp=time.time()))
                last_state = current_state
                last_sent = self.clock()
            elif self.clock() - last_sent >= self.heartbeat:
                yield ': heartbeat\n\n'
                last_sent = self.clock()

            if max_polls is None or polls < max_polls:
                self.sleep(self.interval)

    def stream(self):
        return Response(
            stream_with_context(self.generate()),
            mimetype='text/event-stream',
            headers={
                'Cache-Control': 'no-cache',
                'X-Accel-Buffering': 'no',
            },
        )
