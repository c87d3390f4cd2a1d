from next_compat.firebase.mapper import FirebaseHostingMapper, IHostingMapper

__all__ = ["FirebaseHostingMapper", "IHostingMapper"]
