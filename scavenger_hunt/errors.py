class ScavengerHuntError(Exception):
    '''Base class for scavenger hunt errors.'''


class UnknownActivityError(ScavengerHuntError):
    def __init__(self, activity_id: int):
        super().__init__(f'Activity {activity_id} is not in the catalog')
        self.activity_id = activity_id


class StoreError(ScavengerHuntError):
    '''A key-value store backend failed to read or write.'''
