from __future__ import annotations

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Gauge, start_http_server

from zpeaks.core.bus import EventBus
from zpeaks.core.event import PEAK_HIGH, PEAK_LOW, Event


class PeakPrometheusExporter:
    def __init__(self, port: int = 9109, registry: CollectorRegistry | None = None) -> None:
        self.port = int(port)
        self.registry = registry if registry is not None else REGISTRY
        self._started = False

        self.peaks_total = Counter(
            "zpeaks_peaks_total", "Detected peaks", ["signal", "kind"], registry=self.registry
        )
        self.last_peak_value = Gauge(
            "zpeaks_last_peak_value", "Value of the most recent peak", ["signal"], registry=self.registry
        )
        self.window_mean = Gauge(
            "zpeaks_window_mean", "Window mean at the most recent peak", ["signal"], registry=self.registry
        )
        self.window_stddev = Gauge(
            "zpeaks_window_stddev", "Window stddev at the most recent peak", ["signal"], registry=self.registry
        )

    def start(self) -> None:
        if self._started:
            return
        start_http_server(self.port, registry=self.registry)
        self._started = True

    def attach(self, bus: EventBus) -> None:
        bus.subscribe(PEAK_HIGH, self.handle_peak_event)
        bus.subscribe(PEAK_LOW, self.handle_peak_event)

    def handle_peak_event(self, event: Event) -> None:
        payload = event.payload
        self.peaks_total.labels(signal=event.signal, kind=payload.get("kind", "unknown")).inc()
        self.last_peak_value.labels(signal=event.signal).set(float(payload.get("value", 0.0)))
        if payload.get("mean") is not None:
            self.window_mean.labels(signal=event.signal).set(float(payload["mean"]))
        if payload.get("stddev") is not None:
            self.window_stddev.labels(signal=event.signal).set(float(payload["stddev"]))
