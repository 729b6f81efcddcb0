"""Data models for distro-doctor.

Import from submodules:
- module: ModuleKey, ModuleMetadata, ModuleDescriptor
- selection: ModuleSelectionEntry
- manifest: ModuleManifest
- requirement: PackageRequirement, RequirementStatus, ResolvedRequirement
- diagnostic: DiagnosticEvent, RunSummary, ModuleResolution
"""
