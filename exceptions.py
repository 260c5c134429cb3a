from fastapi import HTTPException, status


class ResourceNotFoundException(HTTPException):
    def __init__(self, resource: str = "Resource"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND,
                         detail=f"{resource} not found")


class DuplicatePatientException(HTTPException):
    def __init__(self):
        super().__init__(status_code=status.HTTP_409_CONFLICT,
                         detail="A patient with this name and phone number already exists")
