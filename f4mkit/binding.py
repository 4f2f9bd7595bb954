"""
Cross-reference binding for F4MKit.

Manifest-scope records (bootstrap info, DRM headers, DVR info, cue points,
SMPTE timecodes, best-effort fetch info) are broadcast onto every media that
references them. Each binder is a pure ``Media -> Media`` function; it is
mapped over ``manifest.medias`` and then over every adaptive set's medias,
and a new Manifest is returned. Records are bound in document order, so a
later matching record replaces an earlier one on the same media.
"""

import dataclasses
from typing import Callable, List, Optional

from .models import (
    BestEffortFetchInfo,
    BootstrapInfo,
    Cue,
    DrmAdditionalHeader,
    DvrInfo,
    Manifest,
    Media,
    SmpteTimecode,
)


MediaBinder = Callable[[Media], Media]


def id_matches(media_ref: str, record_id: str) -> bool:
    """
    Check if a media reference selects a record.

    An empty reference selects every record of that kind.
    """
    return not media_ref or media_ref == record_id


def durations_unset(bootstrap_info: Optional[BootstrapInfo]) -> bool:
    """True if no bootstrap info is bound or it carries neither fragment nor segment duration."""
    if bootstrap_info is None:
        return True

    def _unset(value: Optional[float]) -> bool:
        return value is None or value < 0

    return _unset(bootstrap_info.fragment_duration) and _unset(bootstrap_info.segment_duration)


def all_medias(manifest: Manifest) -> List[Media]:
    """Medias of a manifest in binding order: implicit medias, then each adaptive set."""
    medias = list(manifest.medias)
    for adaptive_set in manifest.adaptive_sets:
        medias.extend(adaptive_set.medias)
    return medias


def map_medias(manifest: Manifest, binder: MediaBinder) -> Manifest:
    """
    Apply a binder to every media of a manifest.

    Args:
        manifest: Manifest to transform
        binder: Function returning the (possibly new) media

    Returns:
        New Manifest; the input is left untouched
    """
    return dataclasses.replace(
        manifest,
        medias=[binder(media) for media in manifest.medias],
        adaptive_sets=[
            dataclasses.replace(adaptive_set, medias=[binder(media) for media in adaptive_set.medias])
            for adaptive_set in manifest.adaptive_sets
        ],
    )


def bind_dvr_info(dvr_info: DvrInfo, version_major: int) -> MediaBinder:
    """
    Bind a dvrInfo record.

    From F4M 2.0 on there is a single DVR info for the whole presentation, so
    it is bound regardless of ids.
    """
    def _bind(media: Media) -> Media:
        if version_major >= 2 or id_matches(media.dvr_info_id, dvr_info.id):
            return dataclasses.replace(media, dvr_info=dvr_info)
        return media
    return _bind


def bind_drm_additional_header(header: DrmAdditionalHeader) -> MediaBinder:
    def _bind(media: Media) -> Media:
        if id_matches(media.drm_additional_header_id, header.id):
            return dataclasses.replace(media, drm_additional_header=header)
        return media
    return _bind


def bind_drm_additional_header_set(set_id: str, headers: List[DrmAdditionalHeader]) -> MediaBinder:
    def _bind(media: Media) -> Media:
        if id_matches(media.drm_additional_header_set_id, set_id):
            return dataclasses.replace(media, drm_additional_header_set=list(headers))
        return media
    return _bind


def bind_bootstrap_info(bootstrap_info: BootstrapInfo) -> MediaBinder:
    def _bind(media: Media) -> Media:
        if id_matches(media.bootstrap_info_id, bootstrap_info.id):
            return dataclasses.replace(media, bootstrap_info=bootstrap_info)
        return media
    return _bind


def bind_smpte_timecode(timecode: SmpteTimecode) -> MediaBinder:
    """Timecodes are additive: appended to every media."""
    def _bind(media: Media) -> Media:
        return dataclasses.replace(media, smpte_time_codes=media.smpte_time_codes + [timecode])
    return _bind


def bind_cue_info(cue_info_id: str, cues: List[Cue]) -> MediaBinder:
    def _bind(media: Media) -> Media:
        if id_matches(media.cue_info_id, cue_info_id):
            return dataclasses.replace(media, cue_info=list(cues))
        return media
    return _bind


def bind_best_effort_fetch_info(info: BestEffortFetchInfo) -> MediaBinder:
    """
    Bind a bestEffortFetchInfo record.

    Only considered for medias whose bootstrap info does not already carry
    fragment and segment durations.
    """
    def _bind(media: Media) -> Media:
        if id_matches(media.best_effort_fetch_info_id, info.id) and durations_unset(media.bootstrap_info):
            return dataclasses.replace(media, best_effort_fetch_info=info)
        return media
    return _bind
