from distro_doctor.integrations.package_index.abc import PackageIndex
from distro_doctor.integrations.package_index.real import RealPackageIndex

__all__ = [
    "PackageIndex",
    "RealPackageIndex",
]
